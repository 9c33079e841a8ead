from unittest import TestCase
from types import ModuleType

from .bufferview import BufferView
from .errors import InternalError, InvalidError
from .instruction import InstructionBCL
from .primitives import Int8U
from .registry import InstructionRegistry


def make_class(name, opcode):
    def copy(self):
        return self.create_new()

    def read(self, view):
        self._read_opcode(view)

    def write(self, view):
        self._write_opcode(view)

    return type(name, (InstructionBCL,), {
        'NAME': name,
        'OPCODE': Int8U(opcode),
        'SIZE': 1,
        'copy': copy,
        'read': read,
        'write': write,
    })


Swap = make_class('Swap', 0x32)
Return = make_class('Return', 0x52)


class TestInstructionRegistry(TestCase):
    def test_lookup(self):
        reg = InstructionRegistry([Swap, Return])
        self.assertEqual(len(reg), 2)
        self.assertIs(reg.by_name('Swap'), Swap)
        self.assertIs(reg.by_opcode(0x52), Return)
        self.assertIsNone(reg.by_name('Pull'))
        self.assertIsNone(reg.by_opcode(0x00))
        self.assertEqual(reg.all_by_name(), {'Swap': Swap, 'Return': Return})
        self.assertEqual(sorted(reg.all_by_opcode()), [0x32, 0x52])

    def test_duplicate_name(self):
        reg = InstructionRegistry([Swap])
        with self.assertRaises(InternalError):
            reg.add(make_class('Swap', 0x33))
        self.assertEqual(len(reg), 1)

    def test_duplicate_opcode(self):
        reg = InstructionRegistry([Swap])
        with self.assertRaises(InternalError) as cm:
            reg.add(make_class('Other', 0x32))
        self.assertIn('0x32', str(cm.exception))
        self.assertIsNone(reg.by_name('Other'))

    def test_from_module(self):
        mod = ModuleType('units')
        mod.Swap = Swap
        mod.Return = Return
        mod.InstructionBCL = InstructionBCL
        mod.Int8U = Int8U
        reg = InstructionRegistry.from_module(mod)
        self.assertEqual(sorted(reg.all_by_name()), ['Return', 'Swap'])

    def test_read(self):
        reg = InstructionRegistry([Swap, Return])
        view = BufferView(b'\x52\x32')
        self.assertIsInstance(reg.read(view), Return)
        self.assertIsInstance(reg.read(view), Swap)
        self.assertTrue(view.eof())

    def test_read_unknown_opcode(self):
        reg = InstructionRegistry([Swap])
        view = BufferView(b'\x99')
        with self.assertRaises(InvalidError) as cm:
            reg.read(view)
        self.assertEqual(str(cm.exception), 'Unknown opcode 0x99')
        self.assertEqual(view.position, 0)
