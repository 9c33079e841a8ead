"""
Runtime support for generated bytecode instruction units.
"""
from .bufferview import BufferView
from .errors import (
    BclError,
    InternalError,
    InvalidError,
    RangeError,
    ReadonlyError,
    UnimplementedCodecError,
)
from .instruction import Instruction, InstructionBCL
from .outcome import Ok, Outcome, Unsupported
from .primitives import (
    Float32,
    Float64,
    Int8S,
    Int8U,
    Int16S,
    Int16U,
    Int32S,
    Int32U,
    Primitive,
)
from .registry import InstructionRegistry

__all__ = [
    'BclError',
    'BufferView',
    'Float32',
    'Float64',
    'Instruction',
    'InstructionBCL',
    'InstructionRegistry',
    'Int8S',
    'Int8U',
    'Int16S',
    'Int16U',
    'Int32S',
    'Int32U',
    'InternalError',
    'InvalidError',
    'Ok',
    'Outcome',
    'Primitive',
    'RangeError',
    'ReadonlyError',
    'UnimplementedCodecError',
    'Unsupported',
]
