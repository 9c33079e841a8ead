"""
Bytecode DSL classes.

This package defines the classes that are used to describe bytecode
instructions: argument types, opcode definitions and their byte layouts.
"""
import keyword
import re


lower_re = re.compile('[^0-9a-z_]')

#: Runtime names imported by every generated unit, whatever its arguments.
CORE_IMPORTS = ('BufferView', 'Int8U')

#: Base class of every generated unit.
UNIT_BASE = 'InstructionBCL'

#: Raised by units with an argument type that has no codec.
UNIMPLEMENTED_ERROR = 'UnimplementedCodecError'

#: Builtins called by generated units.
UNIT_BUILTINS = ('super',)


class SchemaError(Exception):
    """
    An opcode table row is malformed.

    Raised by the loader for an unknown argument type, a bad opcode byte or a
    bad instruction name. `row` is the index of the offending table row, and
    `position` the offending argument position when there is one.
    """

    def __init__(self, message: str, row: int = None, position: int = None):
        if row is not None:
            where = 'row {}'.format(row)
            if position is not None:
                where += ', argument {}'.format(position)
            message = '{}: {}'.format(where, message)
        super().__init__(message)
        self.row = row
        self.position = position


def module_name(name: str) -> str:
    """
    Convert an instruction name to the name of its generated module.

    Names that lower-case to a Python keyword get a trailing underscore.

        >>> module_name('PushConstanti32')
        'pushconstanti32'
        >>> module_name('Return')
        'return_'
    """
    mn = name.lower()
    if keyword.iskeyword(mn):
        mn += '_'
    assert not lower_re.search(mn), 'Bad module name: {}'.format(mn)
    return mn
