"""Binary buffer view with position tracking."""
from typing import Optional, Type, Union

from .errors import RangeError, ReadonlyError
from .primitives import Number, Primitive


def check_range(value: int, name: str, lo: int, hi: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or \
            not lo <= value <= hi:
        raise RangeError(
                'Invalid {}: {!r} not in [{}, {}]'.format(name, value, lo, hi))


class BufferView:
    """
    A fixed-width binary cursor over a window of a buffer.

    The view covers `size` bytes of `data` starting at `offset`, and keeps a
    current position within that window. Reads and writes of fixed-width
    primitives advance the position.

    :param data: A `bytearray` to read and write, or any bytes-like object for
                 a read-only view.
    :param little: True for little endian, False for big endian.
    :param offset: Start of the window in `data`.
    :param size: Size of the window, or -1 for the rest of `data`.
    :param readonly: Refuse writes.
    """

    def __init__(self, data: Union[bytes, bytearray, memoryview],
                 little: bool = True, offset: int = 0, size: int = -1,
                 readonly: bool = False) -> None:
        length = len(data)
        check_range(offset, 'offset', 0, length)
        if size < 0:
            size = length - offset
        check_range(size, 'size', 0, length - offset)
        view = memoryview(data)
        if view.readonly:
            readonly = True
        self._data = view[offset:offset + size]
        self._little = little
        self._readonly = readonly
        self._position = 0

    @property
    def little(self) -> bool:
        """True if little endian."""
        return self._little

    @little.setter
    def little(self, value: bool) -> None:
        self._little = value

    @property
    def readonly(self) -> bool:
        return self._readonly

    @property
    def size(self) -> int:
        """Total bytes in the view."""
        return len(self._data)

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        check_range(value, 'position', 0, self.size)
        self._position = value

    @property
    def remaining(self) -> int:
        """Bytes left from the current position."""
        return self.size - self._position

    def eof(self) -> bool:
        return self._position >= self.size

    def assert_remaining(self, size: int) -> None:
        if size > self.remaining:
            raise RangeError(
                    'Unexpected end of data: wanted {} bytes at position {}'
                    .format(size, self._position))

    def assert_writable(self) -> None:
        if self._readonly:
            raise ReadonlyError('Marked readonly')

    def tobytes(self) -> bytes:
        return self._data.tobytes()

    def copy(self, readonly: bool = False) -> 'BufferView':
        """Copy the view and its bytes. The position is not copied."""
        return BufferView(bytearray(self._data), self._little,
                          readonly=readonly)

    def read_bytes(self, n: int) -> bytes:
        """Read `n` raw bytes."""
        self.assert_remaining(n)
        start = self._position
        self._position += n
        return self._data[start:self._position].tobytes()

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes."""
        self.assert_writable()
        self.assert_remaining(len(data))
        start = self._position
        self._position += len(data)
        self._data[start:self._position] = data

    def read_view(self, size: int = -1,
                  readonly: Optional[bool] = None) -> 'BufferView':
        """
        Read a sub view sharing the same bytes, advancing past it.
        """
        if size < 0:
            size = self.remaining
        self.assert_remaining(size)
        if readonly is None:
            readonly = self._readonly
        sub = BufferView(self._data, self._little, self._position, size,
                         readonly or self._readonly)
        self._position += size
        return sub

    def read_fixed(self, codec: Type[Primitive]) -> Primitive:
        """Read a new `codec` instance at the current position."""
        return codec.unpack(self.read_bytes(codec.SIZE), self._little)

    def write_fixed(self, codec: Type[Primitive],
                    value: Union[Primitive, Number]) -> None:
        """
        Write `value` as `codec` at the current position.

        `value` can be a `codec` instance or a plain number.
        """
        if not isinstance(value, codec):
            value = codec(value)
        self.write_bytes(value.pack(self._little))

    def get_fixed(self, codec: Type[Primitive], offset: int) -> Primitive:
        """Read a `codec` instance at `offset` without moving."""
        check_range(offset, 'offset', 0, self.size - codec.SIZE)
        data = self._data[offset:offset + codec.SIZE].tobytes()
        return codec.unpack(data, self._little)
