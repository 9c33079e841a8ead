"""
Results of instruction reads and writes.

`Instruction.try_read` and `Instruction.try_write` return either `Ok` with the
value, or `Unsupported` with the argument types that have no codec. Other
failures are still raised.
"""
from typing import Any, Sequence, Union


class Ok:
    """A read or write that completed."""

    __slots__ = ('value',)

    def __init__(self, value: Any = None) -> None:
        self.value = value

    def __bool__(self) -> bool:
        return True

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Ok) and self.value == other.value

    def __repr__(self) -> str:
        return 'Ok({!r})'.format(self.value)


class Unsupported:
    """A read or write refused because `tags` have no codec."""

    __slots__ = ('tags',)

    def __init__(self, tags: Sequence[str]) -> None:
        self.tags = tuple(tags)

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Unsupported) and self.tags == other.tags

    def __hash__(self) -> int:
        return hash(('Unsupported', self.tags))

    def __repr__(self) -> str:
        return 'Unsupported({!r})'.format(self.tags)


Outcome = Union[Ok, Unsupported]
