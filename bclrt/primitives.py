"""
Fixed-width primitive codecs.

Each codec class wraps one immutable value and knows how to pack it into, and
unpack it from, its fixed number of bytes.
"""
import math
import re
import struct
from typing import Any, Union

from .errors import RangeError, ReadonlyError

Number = Union[int, float]

prefixed_re = re.compile(r'^([-+]?)0([xob])([0-9a-fA-F_]+)$')


def string_to_number(s: str) -> Number:
    """
    Parse a decimal, hexadecimal, octal or binary number.

        >>> string_to_number('-0x1F')
        -31
        >>> string_to_number('2.5')
        2.5
    """
    s = s.strip()
    m = prefixed_re.match(s)
    if m:
        sign, base, digits = m.groups()
        try:
            v = int(digits, {'x': 16, 'o': 8, 'b': 2}[base])
        except ValueError:
            raise RangeError('Invalid number value: {}'.format(s))
        return -v if sign == '-' else v
    try:
        return int(s, 10)
    except ValueError:
        pass
    try:
        return float(s)
    except ValueError:
        raise RangeError('Invalid number value: {}'.format(s))


class Primitive:
    """
    The base class for primitive types.

    Subclasses set `SIZE` (in bytes) and `FORMAT`, the `struct` format
    character used to encode values.
    """

    SIZE = 0
    FORMAT = ''

    __slots__ = ('value',)

    def __init__(self, value: Number = 0) -> None:
        object.__setattr__(self, 'value', self.check(value))

    def __setattr__(self, name, value):
        raise ReadonlyError('{} is immutable'.format(type(self).__name__))

    def check(self, value: Number) -> Number:
        return value

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __repr__(self) -> str:
        return '{}({!r})'.format(type(self).__name__, self.value)

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def struct_format(cls, little: bool) -> str:
        return ('<' if little else '>') + cls.FORMAT

    def pack(self, little: bool = True) -> bytes:
        """Encode the value as exactly `SIZE` bytes."""
        return struct.pack(self.struct_format(little), self.value)

    @classmethod
    def unpack(cls, data: bytes, little: bool = True) -> 'Primitive':
        """Decode a new instance from exactly `SIZE` bytes."""
        (value,) = struct.unpack(cls.struct_format(little), data)
        return cls(value)

    @classmethod
    def decode(cls, s: str) -> 'Primitive':
        """Decode a new instance from a string."""
        return cls(string_to_number(s))

    def encode(self) -> str:
        """Encode the value as a string."""
        return str(self.value)


class PrimitiveInt(Primitive):
    """The base class for integer types."""

    MIN = 0
    MAX = 0

    __slots__ = ()

    def check(self, value: Number) -> Number:
        if isinstance(value, bool) or not isinstance(value, int):
            if isinstance(value, float) and value.is_integer():
                value = int(value)
            else:
                raise RangeError(
                        'Invalid {} value: {!r}'.format(
                            type(self).__name__, value))
        if not self.MIN <= value <= self.MAX:
            raise RangeError(
                    'Invalid {} value: {} not in [{}, {}]'.format(
                        type(self).__name__, value, self.MIN, self.MAX))
        return value

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def encode(self, base: int = 10) -> str:
        """
        Encode the value in `base` 2, 8, 10 or 16.

            >>> Int16S(-31).encode(16)
            '-0x1f'
        """
        if base == 10:
            return str(self.value)
        prefix = {2: '0b', 8: '0o', 16: '0x'}.get(base)
        if prefix is None:
            raise RangeError('Invalid number base: {}'.format(base))
        digits = format(abs(self.value), {2: 'b', 8: 'o', 16: 'x'}[base])
        return ('-' if self.value < 0 else '') + prefix + digits


class Int8S(PrimitiveInt):
    SIZE = 1
    FORMAT = 'b'
    MIN = -0x80
    MAX = 0x7f
    __slots__ = ()


class Int8U(PrimitiveInt):
    SIZE = 1
    FORMAT = 'B'
    MIN = 0
    MAX = 0xff
    __slots__ = ()


class Int16S(PrimitiveInt):
    SIZE = 2
    FORMAT = 'h'
    MIN = -0x8000
    MAX = 0x7fff
    __slots__ = ()


class Int16U(PrimitiveInt):
    SIZE = 2
    FORMAT = 'H'
    MIN = 0
    MAX = 0xffff
    __slots__ = ()


class Int32S(PrimitiveInt):
    SIZE = 4
    FORMAT = 'i'
    MIN = -0x80000000
    MAX = 0x7fffffff
    __slots__ = ()


class Int32U(PrimitiveInt):
    SIZE = 4
    FORMAT = 'I'
    MIN = 0
    MAX = 0xffffffff
    __slots__ = ()


class PrimitiveFloat(Primitive):
    """
    The base class for float types.

    Values are rounded to the precision of the encoding on construction, so
    an instance compares equal to itself after a round trip through bytes.
    """

    __slots__ = ()

    def check(self, value: Number) -> Number:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise RangeError(
                    'Invalid {} value: {!r}'.format(
                        type(self).__name__, value))
        fmt = self.struct_format(True)
        try:
            (value,) = struct.unpack(fmt, struct.pack(fmt, value))
        except (OverflowError, struct.error):
            raise RangeError(
                    'Invalid {} value: {!r}'.format(
                        type(self).__name__, value))
        return value

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        if math.isnan(self.value) and math.isnan(other.value):
            return True
        return self.value == other.value

    def __hash__(self) -> int:
        if math.isnan(self.value):
            return hash((type(self).__name__, 'nan'))
        return hash((type(self).__name__, self.value))

    def __float__(self) -> float:
        return self.value


class Float32(PrimitiveFloat):
    SIZE = 4
    FORMAT = 'f'
    __slots__ = ()


class Float64(PrimitiveFloat):
    SIZE = 8
    FORMAT = 'd'
    __slots__ = ()
