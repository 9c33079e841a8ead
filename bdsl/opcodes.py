"""
Opcode definitions and the opcode table loader.

An opcode table is an ordered list of rows `[opcode_hex, name, [argtypes]]`,
normally stored as a JSON file. `load_table` turns the rows into
`OpcodeDefinition` records, in table order, and stops at the first bad row.
"""
import json
import keyword
import logging
import re
from typing import Any, Dict, List, Sequence, Tuple

from . import (
    CORE_IMPORTS,
    SchemaError,
    UNIMPLEMENTED_ERROR,
    UNIT_BASE,
    UNIT_BUILTINS,
    module_name,
)
from .argtypes import ArgType

log = logging.getLogger(__name__)

hex_re = re.compile('[0-9A-Fa-f]{1,2}')

#: Names an instruction can't take: every runtime name a unit may import,
#: and the builtins a unit calls.
RESERVED_NAMES = frozenset(
        CORE_IMPORTS + (UNIT_BASE, UNIMPLEMENTED_ERROR) + UNIT_BUILTINS +
        tuple(a.codec for a in ArgType.all_argtypes if a.implemented()))


class OpcodeDefinition:
    """
    A single instruction of the opcode table.

    :param opcode: The opcode byte, 0-255.
    :param name: Instruction name, a Python identifier.
    :param argtypes: Argument types, in encoding order.
    """

    __slots__ = ('opcode', 'name', 'argtypes')

    def __init__(self, opcode: int, name: str,
                 argtypes: Sequence[ArgType]) -> None:
        assert 0 <= opcode <= 0xff, 'Opcode out of range: {}'.format(opcode)
        assert name.isidentifier(), 'Bad instruction name: {}'.format(name)
        object.__setattr__(self, 'opcode', opcode)
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'argtypes', tuple(argtypes))

    def __setattr__(self, name, value):
        raise AttributeError('OpcodeDefinition is immutable')

    def __repr__(self) -> str:
        return 'OpcodeDefinition({:#04x}, {}, ({}))'.format(
                self.opcode, self.name,
                ', '.join(str(a) for a in self.argtypes))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, OpcodeDefinition):
            return NotImplemented
        return (self.opcode, self.name, self.argtypes) == \
            (other.opcode, other.name, other.argtypes)

    def __hash__(self) -> int:
        return hash((self.opcode, self.name, self.argtypes))

    @property
    def argc(self) -> int:
        return len(self.argtypes)


def parse_row(index: int, row: Any) -> OpcodeDefinition:
    """
    Parse and validate a single table row.

        >>> parse_row(0, ['40', 'PushConstanti32', ['i32s']])
        OpcodeDefinition(0x40, PushConstanti32, (i32s))
    """
    if not isinstance(row, (list, tuple)) or len(row) != 3:
        raise SchemaError(
                'Expected [opcode, name, argtypes], got {!r}'.format(row),
                row=index)
    opcode_hex, name, argtypes = row

    if not isinstance(opcode_hex, str) or not hex_re.fullmatch(opcode_hex):
        raise SchemaError('Bad opcode: {!r}'.format(opcode_hex), row=index)
    if not isinstance(name, str) or not name.isascii() or \
            not name.isidentifier() or keyword.iskeyword(name):
        raise SchemaError('Bad instruction name: {!r}'.format(name), row=index)
    if name in RESERVED_NAMES:
        raise SchemaError(
                'Reserved instruction name: {!r}'.format(name), row=index)
    if not isinstance(argtypes, (list, tuple)):
        raise SchemaError(
                'Argument types must be a list, got {!r}'.format(argtypes),
                row=index)

    types: List[ArgType] = []
    for pos, tag in enumerate(argtypes):
        try:
            types.append(ArgType.by_name(tag))
        except (LookupError, TypeError):
            raise SchemaError(
                    'Unknown type: {!r}'.format(tag), row=index, position=pos)

    return OpcodeDefinition(int(opcode_hex, 16), name, types)


def check_duplicates(defs: Sequence[OpcodeDefinition]) -> None:
    """
    Log a warning for every opcode that appears more than once, and for every
    pair of names that map to the same unit module file.

    Duplicates are not an error. The later row's unit overwrites the file of
    the earlier one.
    """
    opcodes: Dict[int, str] = dict()
    modules: Dict[str, str] = dict()
    for d in defs:
        if d.opcode in opcodes:
            log.warning(
                    'Duplicate opcode 0x%02X: %s and %s',
                    d.opcode, opcodes[d.opcode], d.name)
        else:
            opcodes[d.opcode] = d.name
        mn = module_name(d.name)
        if mn in modules:
            log.warning(
                    'Module file collision %s.py: %s and %s',
                    mn, modules[mn], d.name)
        else:
            modules[mn] = d.name


def load_table(rows: Sequence[Any]) -> Tuple[OpcodeDefinition, ...]:
    """
    Load an ordered opcode table.

    Return the definitions in table order. Raise `SchemaError` for the first
    malformed row.
    """
    if not isinstance(rows, (list, tuple)):
        raise SchemaError('Opcode table must be a list of rows')
    defs: List[OpcodeDefinition] = []
    for index, row in enumerate(rows):
        defs.append(parse_row(index, row))
    check_duplicates(defs)
    log.debug('Loaded %d opcode definitions', len(defs))
    return tuple(defs)


def load_file(path: str) -> Tuple[OpcodeDefinition, ...]:
    """Load an opcode table from a JSON file."""
    with open(path, encoding='utf-8') as f:
        try:
            rows = json.load(f)
        except ValueError as e:
            raise SchemaError('{}: invalid JSON: {}'.format(path, e))
    return load_table(rows)
