"""
Generate instruction unit modules.

Every row of the opcode table becomes one Python module containing a single
`InstructionBCL` subclass. The class carries the instruction constants and
reads and writes itself with the codecs bound by its layout plan.

If any argument type of an instruction has no codec, both its `read` and
`write` methods raise `UnimplementedCodecError` after the opcode, naming every
such type. No argument of that instruction is read or written.

For each unit a manifest line re-exporting its class is printed, in table
order, for the package `__init__.py`.
"""
import logging
from typing import Iterable, List, Sequence

import srcgen
from bdsl import CORE_IMPORTS, UNIMPLEMENTED_ERROR, UNIT_BASE, module_name
from bdsl.layout import ArgumentBinding, LayoutPlan, compute_layout
from bdsl.opcodes import RESERVED_NAMES, OpcodeDefinition, load_file
from genconfig import GenConfig

log = logging.getLogger(__name__)


class GeneratedUnit:
    """The generated module for one opcode definition."""

    def __init__(self, defn: OpcodeDefinition, fmt: srcgen.Formatter,
                 extension: str) -> None:
        self.defn = defn
        self.fmt = fmt
        self.module = module_name(defn.name)
        self.filename = self.module + extension
        self.manifest = manifest_line(defn)

    @property
    def source(self) -> str:
        return self.fmt.text()


def format_opcode_hex(opcode: int) -> str:
    """
    Format an opcode byte as two upper-case hex digits.

        >>> format_opcode_hex(0x01), format_opcode_hex(0x1f)
        ('01', '1F')
    """
    assert 0 <= opcode <= 0xff, 'Opcode out of range: {}'.format(opcode)
    return '{:02X}'.format(opcode)


def tuple_literal(items: Sequence[str]) -> str:
    """
    Format already rendered items as a tuple display.

        >>> tuple_literal([]), tuple_literal(['a']), tuple_literal(['a', 'b'])
        ('()', '(a,)', '(a, b)')
    """
    if len(items) == 1:
        return '({},)'.format(items[0])
    return '({})'.format(', '.join(items))


def arg_kind(binding: ArgumentBinding) -> str:
    """The codec class name of an argument, or `None`."""
    return binding.codec if binding.codec is not None else 'None'


def arg_default(binding: ArgumentBinding) -> str:
    """The initial value of an argument slot."""
    if binding.codec is None:
        return 'None'
    return '{}()'.format(binding.codec)


def manifest_line(defn: OpcodeDefinition) -> str:
    """
    The line re-exporting the unit of `defn` from its package.

        >>> manifest_line(OpcodeDefinition(0x52, 'Return', ()))
        'from .return_ import Return'
    """
    return 'from .{} import {}'.format(module_name(defn.name), defn.name)


def collect_imports(plan: LayoutPlan) -> List[str]:
    """
    Runtime names imported by a unit, sorted and without duplicates.
    """
    names = set(CORE_IMPORTS)
    names.update(plan.codecs())
    return sorted(names)


def gen_imports(plan: LayoutPlan, runtime: str,
                fmt: srcgen.Formatter) -> None:
    with fmt.indented('from {} import ('.format(runtime), ')'):
        for name in collect_imports(plan):
            fmt.line(name + ',')
    if plan.has_unimplemented:
        fmt.line('from {}.errors import {}'.format(
            runtime, UNIMPLEMENTED_ERROR))
    fmt.line('from {}.instruction import {}'.format(runtime, UNIT_BASE))


def gen_constants(defn: OpcodeDefinition, plan: LayoutPlan,
                  fmt: srcgen.Formatter) -> None:
    """
    Emit the class constants.
    """
    constants = [
        ('Instruction size.', 'SIZE', str(plan.size)),
        ('Opcode name.', 'NAME', "'{}'".format(defn.name)),
        ('The opcode.', 'OPCODE',
            'Int8U(0x{})'.format(format_opcode_hex(defn.opcode))),
        ('Argument count.', 'ARGC', str(defn.argc)),
        ('Argument kinds.', 'ARGS',
            tuple_literal([arg_kind(b) for b in plan.bindings])),
        ('Argument types.', 'ARG_TYPES',
            tuple_literal(["'{}'".format(a) for a in defn.argtypes])),
        ('Argument types without a codec.', 'UNSUPPORTED',
            tuple_literal(["'{}'".format(t) for t in plan.unimplemented])),
    ]
    for doc, name, value in constants:
        fmt.line()
        fmt.line('#: ' + doc)
        fmt.format('{} = {}', name, value)


def gen_init(plan: LayoutPlan, fmt: srcgen.Formatter) -> None:
    defaults = [arg_default(b) for b in plan.bindings]
    fmt.line()
    with fmt.indented('def __init__(self) -> None:'):
        fmt.line('super().__init__()')
        fmt.format('self.args = [{}]', ', '.join(defaults))


def gen_copy(defn: OpcodeDefinition, fmt: srcgen.Formatter) -> None:
    """
    Emit `copy`. Every slot is copied, with or without a codec.
    """
    fmt.line()
    with fmt.indented("def copy(self) -> '{}':".format(defn.name)):
        fmt.doc_comment('Copy instance.')
        fmt.line('r = self.create_new()')
        for i in range(defn.argc):
            fmt.format('r.args[{0}] = self.args[{0}]', i)
        fmt.line('return r')


def unimplemented_statement(plan: LayoutPlan) -> str:
    return 'raise {}({})'.format(
        UNIMPLEMENTED_ERROR,
        tuple_literal(["'{}'".format(t) for t in plan.unimplemented]))


def gen_read(plan: LayoutPlan, fmt: srcgen.Formatter) -> None:
    fmt.line()
    with fmt.indented('def read(self, view: BufferView) -> None:'):
        fmt.doc_comment('Read the instruction from `view`.')
        fmt.line('self._read_opcode(view)')
        if plan.has_unimplemented:
            fmt.line(unimplemented_statement(plan))
            return
        for i, b in enumerate(plan.bindings):
            fmt.format('self.args[{}] = view.read_fixed({})', i, b.codec)


def gen_write(plan: LayoutPlan, fmt: srcgen.Formatter) -> None:
    fmt.line()
    with fmt.indented('def write(self, view: BufferView) -> None:'):
        fmt.doc_comment('Write the instruction to `view`.')
        fmt.line('self._write_opcode(view)')
        if plan.has_unimplemented:
            fmt.line(unimplemented_statement(plan))
            return
        for i, b in enumerate(plan.bindings):
            fmt.format('view.write_fixed({}, self.args[{}])', b.codec, i)


def gen_unit(defn: OpcodeDefinition, plan: LayoutPlan,
             runtime: str = 'bclrt') -> srcgen.Formatter:
    """
    Generate the module source of one instruction unit.
    """
    assert defn.name not in RESERVED_NAMES, \
        'Reserved instruction name: {}'.format(defn.name)

    fmt = srcgen.Formatter()
    fmt.doc_comment(
            """
            {} instruction.

            Generated code, do not edit.
            """.format(defn.name))
    gen_imports(plan, runtime, fmt)
    fmt.blank_lines(2)
    with fmt.indented('class {}({}):'.format(defn.name, UNIT_BASE)):
        fmt.doc_comment('{} instruction, opcode 0x{}.'.format(
            defn.name, format_opcode_hex(defn.opcode)))
        gen_constants(defn, plan, fmt)
        gen_init(plan, fmt)
        gen_copy(defn, fmt)
        gen_read(plan, fmt)
        gen_write(plan, fmt)
    return fmt


def render_unit(defn: OpcodeDefinition, runtime: str = 'bclrt') -> str:
    """Return the module source of the unit for `defn`."""
    return gen_unit(defn, compute_layout(defn), runtime).text()


def build_unit(defn: OpcodeDefinition, config: GenConfig) -> GeneratedUnit:
    plan = compute_layout(defn)
    fmt = gen_unit(defn, plan, config.runtime)
    return GeneratedUnit(defn, fmt, config.extension)


def gen_index(units: Iterable[GeneratedUnit], config: GenConfig) -> None:
    """
    Write the manifest as the `__init__.py` of the output package.
    """
    fmt = srcgen.Formatter()
    fmt.doc_comment(
            """
            Bytecode instruction units.

            Generated code, do not edit.
            """)
    for unit in units:
        fmt.line(unit.manifest)
    path = fmt.update_file('__init__.py', config.out_dir)
    log.debug('Wrote %s', path)


def generate(defs: Sequence[OpcodeDefinition],
             config: GenConfig) -> List[GeneratedUnit]:
    """
    Generate, write and list one unit per definition, in order.

    Each unit is written before the next one is generated. An error stops
    the run and leaves the units written so far in place.
    """
    units: List[GeneratedUnit] = []
    for defn in defs:
        unit = build_unit(defn, config)
        path = unit.fmt.update_file(unit.filename, config.out_dir)
        log.debug('Wrote %s', path)
        print(unit.manifest, file=config.manifest)
        units.append(unit)
    if config.index:
        gen_index(units, config)
    log.info('Generated %d instruction units in %s', len(units),
             config.out_dir)
    return units


def generate_file(config: GenConfig) -> List[GeneratedUnit]:
    """Load the opcode table named by `config` and generate its units."""
    defs = load_file(config.table_path)
    return generate(defs, config)
