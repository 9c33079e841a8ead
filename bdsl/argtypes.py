"""
Instruction argument types.

Every instruction argument is declared with one of the `ArgType` instances
defined here. An argument type has a fixed byte width, and names the runtime
codec class that reads and writes it. Types without a codec are still counted
in the instruction layout, but can't be read or written.
"""
from typing import Dict, List, Optional


class ArgType:
    """
    A primitive instruction argument type.

    :param name: Tag used in opcode tables.
    :param width: Encoded size in bytes.
    :param codec: Name of the runtime codec class, or `None` when no codec is
                  implemented for this type yet.
    """

    # Map name -> ArgType.
    _registry: Dict[str, 'ArgType'] = dict()

    # All argument types in definition order.
    all_argtypes: List['ArgType'] = list()

    def __init__(self, name: str, width: int, codec: Optional[str],
                 doc: str) -> None:
        assert width > 0, 'Argument width must be positive'
        assert name not in ArgType._registry, \
            "'{}' multiply defined".format(name)
        self.name = name
        self.width = width
        self.codec = codec
        self.__doc__ = doc
        ArgType._registry[name] = self
        ArgType.all_argtypes.append(self)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return 'ArgType({})'.format(self.name)

    def implemented(self) -> bool:
        """Return true if this type has a working codec."""
        return self.codec is not None

    @staticmethod
    def by_name(name: str) -> 'ArgType':
        """
        Look up an argument type by its table tag.

            >>> ArgType.by_name('i16u')
            ArgType(i16u)
        """
        if name in ArgType._registry:
            return ArgType._registry[name]
        else:
            raise LookupError("No argument type named '{}'".format(name))


i8s = ArgType('i8s', 1, 'Int8S', 'Signed 8-bit integer.')
i8u = ArgType('i8u', 1, 'Int8U', 'Unsigned 8-bit integer.')
i16s = ArgType('i16s', 2, 'Int16S', 'Signed 16-bit integer.')
i16u = ArgType('i16u', 2, 'Int16U', 'Unsigned 16-bit integer.')

# The 24-bit integers occupy their three bytes in the instruction stream, but
# there is no codec for them.
int24s = ArgType('int24s', 3, None, 'Signed 24-bit integer.')
int24u = ArgType('int24u', 3, None, 'Unsigned 24-bit integer.')

i32s = ArgType('i32s', 4, 'Int32S', 'Signed 32-bit integer.')
i32u = ArgType('i32u', 4, 'Int32U', 'Unsigned 32-bit integer.')

#: IEEE single precision.
f32 = ArgType('f32', 4, 'Float32', 'IEEE 754 binary32 float.')

#: IEEE double precision.
f64 = ArgType('f64', 8, 'Float64', 'IEEE 754 binary64 float.')
