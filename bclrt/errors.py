"""Exception classes for the bytecode runtime."""
from typing import Sequence


class BclError(Exception):
    """Base class for all bytecode runtime errors."""

    pass


class RangeError(BclError, ValueError):
    """A value, offset or size is out of range."""

    pass


class ReadonlyError(BclError):
    """Write attempted on a read-only buffer view."""

    pass


class InvalidError(BclError):
    """Invalid data, argument index or argument kind."""

    pass


class InternalError(BclError):
    """Inconsistent instruction definitions."""

    pass


class UnimplementedCodecError(BclError):
    """
    An instruction argument type has no codec.

    Raised when reading or writing an instruction that declares an argument
    type without a codec. `tags` lists every such type, in order of first
    appearance.
    """

    def __init__(self, tags: Sequence[str]) -> None:
        self.tags = tuple(tags)
        super().__init__(
                'Unknown implementations: {}'.format(', '.join(self.tags)))
