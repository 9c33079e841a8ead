"""
Instruction byte layouts.

The layout of an instruction is its one byte opcode header followed by each
argument at the fixed width of its type. Widths are counted for every
argument whether or not its type has a codec, so the offsets of the
following instructions stay correct.
"""
from typing import List, Optional, Tuple

from .argtypes import ArgType
from .opcodes import OpcodeDefinition

#: Size of the opcode header that starts every instruction.
OPCODE_SIZE = 1


class ArgumentBinding:
    """
    The layout of a single argument.

    `codec` is the runtime codec class name, or `None` if the argument type is
    not implemented.
    """

    __slots__ = ('argtype', 'width', 'codec')

    def __init__(self, argtype: ArgType) -> None:
        self.argtype = argtype
        self.width = argtype.width
        self.codec: Optional[str] = argtype.codec

    def __repr__(self) -> str:
        return 'ArgumentBinding({}, {}, {})'.format(
                self.argtype, self.width, self.codec)


class LayoutPlan:
    """
    The byte layout of an instruction.

    :param size: Total instruction size in bytes, including the opcode.
    :param bindings: Argument bindings in declared order.
    :param unimplemented: Names of the argument types without a codec, in
                          order of first appearance, each listed once.
    """

    def __init__(self, size: int, bindings: Tuple[ArgumentBinding, ...],
                 unimplemented: Tuple[str, ...]) -> None:
        self.size = size
        self.bindings = bindings
        self.unimplemented = unimplemented

    def __repr__(self) -> str:
        return 'LayoutPlan(size={}, bindings={}, unimplemented={})'.format(
                self.size, self.bindings, self.unimplemented)

    @property
    def has_unimplemented(self) -> bool:
        return bool(self.unimplemented)

    def codecs(self) -> List[str]:
        """Codec names referenced by the implemented arguments."""
        return [b.codec for b in self.bindings if b.codec is not None]


def compute_layout(defn: OpcodeDefinition) -> LayoutPlan:
    """
    Compute the layout of `defn`.

        >>> from bdsl.argtypes import i8u, int24u
        >>> plan = compute_layout(
        ...     OpcodeDefinition(0x41, 'Push', [i8u, int24u]))
        >>> plan.size, plan.unimplemented
        (5, ('int24u',))
    """
    size = OPCODE_SIZE
    bindings: List[ArgumentBinding] = []
    unimplemented: List[str] = []
    for argtype in defn.argtypes:
        binding = ArgumentBinding(argtype)
        size += binding.width
        if not argtype.implemented() and argtype.name not in unimplemented:
            unimplemented.append(argtype.name)
        bindings.append(binding)
    return LayoutPlan(size, tuple(bindings), tuple(unimplemented))
