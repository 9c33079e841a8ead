"""
Instruction base classes.

Generated instruction units subclass `InstructionBCL` and provide the class
constants and the `copy`, `read` and `write` methods. Everything that does not
depend on the argument layout lives here.
"""
from typing import Any, List, Optional, Tuple, Type

from .bufferview import BufferView
from .errors import InvalidError, UnimplementedCodecError
from .outcome import Ok, Outcome, Unsupported
from .primitives import Int8U, Primitive


class Instruction:
    """
    The base class for instruction types.

    Concrete instruction classes define:

    - `NAME`: instruction name.
    - `SIZE`: encoded size in bytes, including the opcode.
    - `ARGC`: argument count.
    - `ARGS`: per-argument codec classes, `None` for argument types without a
      codec.
    - `ARG_TYPES`: per-argument type tags.
    - `UNSUPPORTED`: type tags without a codec, in first appearance order.

    The argument values are kept in the `args` list, one slot per argument.
    """

    NAME: Optional[str] = None
    SIZE = 0
    ARGC = 0
    ARGS: Tuple[Optional[Type[Primitive]], ...] = ()
    ARG_TYPES: Tuple[str, ...] = ()
    UNSUPPORTED: Tuple[str, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if 'NAME' not in cls.__dict__:
            return
        assert len(cls.ARGS) == cls.ARGC, \
            '{}: ARGS has {} entries, ARGC is {}'.format(
                    cls.NAME, len(cls.ARGS), cls.ARGC)
        assert len(cls.ARG_TYPES) == cls.ARGC, \
            '{}: ARG_TYPES has {} entries, ARGC is {}'.format(
                    cls.NAME, len(cls.ARG_TYPES), cls.ARGC)
        assert bool(cls.UNSUPPORTED) == (None in cls.ARGS), \
            '{}: UNSUPPORTED does not match ARGS'.format(cls.NAME)

    def __init__(self) -> None:
        self.args: List[Optional[Primitive]] = []

    def __repr__(self) -> str:
        return '{}({})'.format(
                type(self).__name__, ', '.join(repr(a) for a in self.args))

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args

    __hash__ = None  # type: ignore

    @property
    def name(self) -> str:
        return type(self).NAME

    @property
    def size(self) -> int:
        return type(self).SIZE

    @property
    def argc(self) -> int:
        return type(self).ARGC

    def create_new(self) -> 'Instruction':
        """Create a new default instance of the same class."""
        return type(self)()

    def copy(self) -> 'Instruction':
        raise NotImplementedError('copy is an abstract method')

    def read(self, view: BufferView) -> None:
        raise NotImplementedError('read is an abstract method')

    def write(self, view: BufferView) -> None:
        raise NotImplementedError('write is an abstract method')

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int) or \
                not 0 <= index < self.argc:
            raise InvalidError('Invalid argument index: {}'.format(index))

    def arg_get(self, index: int) -> Optional[Primitive]:
        """Get an argument value by index."""
        self._check_index(index)
        return self.args[index]

    def arg_set(self, index: int, value: Any) -> None:
        """
        Set an argument value by index.

        Numbers and other primitives are cast to the argument's codec class.
        """
        self._check_index(index)
        kind = type(self).ARGS[index]
        if kind is None:
            raise UnimplementedCodecError((type(self).ARG_TYPES[index],))
        if isinstance(value, kind):
            cast = value
        elif isinstance(value, Primitive):
            cast = kind(value.value)
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            cast = kind(value)
        else:
            raise InvalidError('Invalid type: {!r}'.format(value))
        self.args[index] = cast

    def try_read(self, view: BufferView) -> Outcome:
        """
        Read the instruction unless an argument type has no codec.

        Returns `Unsupported` without touching `view` in that case.
        """
        if self.UNSUPPORTED:
            return Unsupported(self.UNSUPPORTED)
        self.read(view)
        return Ok(self)

    def try_write(self, view: BufferView) -> Outcome:
        """
        Write the instruction unless an argument type has no codec.

        Returns `Unsupported` without touching `view` in that case.
        """
        if self.UNSUPPORTED:
            return Unsupported(self.UNSUPPORTED)
        self.write(view)
        return Ok(self.size)


class InstructionBCL(Instruction):
    """
    The base class for bytecode instructions with a one byte opcode.
    """

    OPCODE: Optional[Int8U] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if 'NAME' in cls.__dict__:
            assert isinstance(cls.OPCODE, Int8U), \
                '{}: OPCODE must be an Int8U'.format(cls.NAME)

    @property
    def opcode(self) -> Int8U:
        return type(self).OPCODE

    def _read_opcode(self, view: BufferView) -> None:
        """Read and verify the opcode."""
        op = self.opcode
        opcode = view.read_fixed(Int8U)
        if opcode == op:
            return
        raise InvalidError(
                'Opcode not expected 0x{:02X}: 0x{:02X}'.format(
                    op.value, opcode.value))

    def _write_opcode(self, view: BufferView) -> None:
        view.write_fixed(Int8U, self.opcode)
