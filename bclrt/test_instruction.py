from unittest import TestCase

from .bufferview import BufferView
from .errors import InvalidError, UnimplementedCodecError
from .instruction import InstructionBCL
from .outcome import Ok, Unsupported
from .primitives import Float32, Int8S, Int8U, Int16U


class Jump(InstructionBCL):
    NAME = 'Jump'
    OPCODE = Int8U(0x21)
    SIZE = 4
    ARGC = 2
    ARGS = (Int16U, Int8S)
    ARG_TYPES = ('i16u', 'i8s')
    UNSUPPORTED = ()

    def __init__(self):
        super().__init__()
        self.args = [Int16U(), Int8S()]

    def copy(self):
        r = self.create_new()
        r.args = list(self.args)
        return r

    def read(self, view):
        self._read_opcode(view)
        self.args[0] = view.read_fixed(Int16U)
        self.args[1] = view.read_fixed(Int8S)

    def write(self, view):
        self._write_opcode(view)
        view.write_fixed(Int16U, self.args[0])
        view.write_fixed(Int8S, self.args[1])


class Wide(InstructionBCL):
    NAME = 'Wide'
    OPCODE = Int8U(0x22)
    SIZE = 5
    ARGC = 2
    ARGS = (None, Float32)
    ARG_TYPES = ('int24u', 'f32')
    UNSUPPORTED = ('int24u',)

    def __init__(self):
        super().__init__()
        self.args = [None, Float32()]

    def copy(self):
        r = self.create_new()
        r.args = list(self.args)
        return r

    def read(self, view):
        self._read_opcode(view)
        raise UnimplementedCodecError(self.UNSUPPORTED)

    def write(self, view):
        self._write_opcode(view)
        raise UnimplementedCodecError(self.UNSUPPORTED)


class TestInstruction(TestCase):
    def test_properties(self):
        inst = Jump()
        self.assertEqual(inst.name, 'Jump')
        self.assertEqual(inst.size, 4)
        self.assertEqual(inst.argc, 2)
        self.assertEqual(inst.opcode, Int8U(0x21))
        self.assertEqual(repr(inst), 'Jump(Int16U(0), Int8S(0))')

    def test_arg_set_casts(self):
        inst = Jump()
        inst.arg_set(0, 300)
        inst.arg_set(1, Int8U(5))
        self.assertEqual(inst.arg_get(0), Int16U(300))
        self.assertEqual(inst.arg_get(1), Int8S(5))
        inst.arg_set(1, Int8S(-1))
        self.assertEqual(inst.args[1], Int8S(-1))

    def test_arg_set_errors(self):
        inst = Jump()
        with self.assertRaises(InvalidError):
            inst.arg_set(2, 1)
        with self.assertRaises(InvalidError):
            inst.arg_get(-1)
        with self.assertRaises(InvalidError):
            inst.arg_set(0, 'x')
        with self.assertRaises(InvalidError):
            inst.arg_set(True, 1)

    def test_arg_set_unimplemented(self):
        inst = Wide()
        with self.assertRaises(UnimplementedCodecError) as cm:
            inst.arg_set(0, 1)
        self.assertEqual(cm.exception.tags, ('int24u',))
        inst.arg_set(1, 0.5)
        self.assertEqual(inst.args[1], Float32(0.5))

    def test_round_trip(self):
        inst = Jump()
        inst.arg_set(0, 0x1234)
        inst.arg_set(1, -2)
        data = bytearray(inst.size)
        inst.write(BufferView(data))
        self.assertEqual(bytes(data), b'\x21\x34\x12\xfe')
        other = Jump()
        other.read(BufferView(bytes(data)))
        self.assertEqual(other, inst)

    def test_read_wrong_opcode(self):
        with self.assertRaises(InvalidError) as cm:
            Jump().read(BufferView(b'\x22\x00\x00\x00'))
        self.assertEqual(str(cm.exception),
                         'Opcode not expected 0x21: 0x22')

    def test_copy_is_independent(self):
        inst = Jump()
        dup = inst.copy()
        dup.arg_set(0, 9)
        self.assertEqual(inst.args[0], Int16U(0))
        self.assertIsNot(dup, inst)

    def test_unhashable(self):
        with self.assertRaises(TypeError):
            hash(Jump())

    def test_try_write(self):
        data = bytearray(4)
        self.assertEqual(Jump().try_write(BufferView(data)), Ok(4))
        data = bytearray(b'\xee' * 5)
        view = BufferView(data)
        outcome = Wide().try_write(view)
        self.assertFalse(outcome)
        self.assertEqual(outcome, Unsupported(('int24u',)))
        self.assertEqual(view.position, 0)
        self.assertEqual(bytes(data), b'\xee' * 5)

    def test_unimplemented_write_raises(self):
        data = bytearray(5)
        with self.assertRaises(UnimplementedCodecError) as cm:
            Wide().write(BufferView(data))
        self.assertEqual(str(cm.exception), 'Unknown implementations: int24u')


class TestSubclassChecks(TestCase):
    def test_arity_mismatch(self):
        with self.assertRaises(AssertionError):
            class Bad(InstructionBCL):
                NAME = 'Bad'
                OPCODE = Int8U(1)
                ARGC = 1
                ARGS = ()
                ARG_TYPES = ()

    def test_unsupported_mismatch(self):
        with self.assertRaises(AssertionError):
            class Bad(InstructionBCL):
                NAME = 'Bad'
                OPCODE = Int8U(1)
                ARGC = 1
                ARGS = (None,)
                ARG_TYPES = ('int24s',)

    def test_opcode_type(self):
        with self.assertRaises(AssertionError):
            class Bad(InstructionBCL):
                NAME = 'Bad'
                OPCODE = 1
