import unittest
from ali_interpreter.common.errors import AllocationExhaustedError
from ali_interpreter.core.instruction import Instruction, Opcode, ADVANCE
from ali_interpreter.core.memory import MemoryBank, DataCell, EMPTY
from ali_interpreter.core.state import RegisterFile, Flags
from ali_interpreter.core.symbols import SymbolTable
from ali_interpreter.isa import execute_instruction

class TestLoadInstructions(unittest.TestCase):
    def setUp(self):
        self.registers = RegisterFile()
        self.flags = Flags()
        self.memory = MemoryBank()
        self.symbols = SymbolTable()

    def _execute(self, opcode, operand=None):
        op = Instruction(opcode, operand)
        return execute_instruction(op, self.registers, self.flags, self.memory, self.symbols)

    def test_dec_initializes_new_symbol(self):
        directive = self._execute(Opcode.DEC, "sum")
        self.assertEqual(directive, ADVANCE)
        self.assertEqual(self.symbols.lookup("sum"), 128)
        self.assertEqual(self.memory.peek(128), DataCell(0))

    def test_dec_keeps_existing_value_and_still_advances(self):
        self.memory.set(self.symbols.resolve("sum"), DataCell(17))
        directive = self._execute(Opcode.DEC, "sum")
        # Directive must not depend on whether the cell was already initialized
        self.assertEqual(directive, ADVANCE)
        self.assertEqual(self.memory.peek(128), DataCell(17))

    def test_lda_loads_value(self):
        self.memory.set(self.symbols.resolve("a"), DataCell(-8))
        self.assertEqual(self._execute(Opcode.LDA, "a"), ADVANCE)
        self.assertEqual(self.registers.accumulator, -8)

    def test_lda_empty_cell_is_zero(self):
        self.registers.accumulator = 99
        self._execute(Opcode.LDA, "unset")
        self.assertEqual(self.registers.accumulator, 0)
        self.assertIs(self.memory.peek(128), EMPTY)

    def test_ldi_negative(self):
        self.assertEqual(self._execute(Opcode.LDI, -42), ADVANCE)
        self.assertEqual(self.registers.accumulator, -42)

    def test_str_stores_accumulator(self):
        self.registers.accumulator = 123
        self.assertEqual(self._execute(Opcode.STR, "x"), ADVANCE)
        self.assertEqual(self.memory.peek(128), DataCell(123))

    def test_xch_swaps(self):
        self.registers.accumulator = 1
        self.registers.data_register = 2
        self.assertEqual(self._execute(Opcode.XCH), ADVANCE)
        self.assertEqual((self.registers.accumulator, self.registers.data_register), (2, 1))

    def test_load_store_do_not_touch_flags(self):
        self.flags.zero = True
        self.flags.overflow = True
        self._execute(Opcode.LDI, 0)
        self._execute(Opcode.STR, "x")
        self._execute(Opcode.XCH)
        self.assertTrue(self.flags.zero)
        self.assertTrue(self.flags.overflow)

    def test_symbol_ops_fail_without_mutation_when_exhausted(self):
        for i in range(128):
            self.symbols.resolve(f"v{i}")
        self.memory.get_and_clear_access_log()
        self.registers.accumulator = 5
        for opcode in (Opcode.DEC, Opcode.LDA, Opcode.STR):
            with self.assertRaises(AllocationExhaustedError):
                self._execute(opcode, "new_symbol")
        self.assertEqual(self.registers.accumulator, 5)
        self.assertEqual(self.memory.get_and_clear_access_log(), [])

if __name__ == '__main__':
    unittest.main()
