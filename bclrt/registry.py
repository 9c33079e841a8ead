"""
Instruction lookup by name and by opcode.

A generated instruction package re-exports every unit class from its
`__init__.py`. `InstructionRegistry.from_module` collects those classes so
that a decoder can find the class for an opcode byte.
"""
import inspect
from types import ModuleType
from typing import Dict, Iterable, Optional, Type

from .bufferview import BufferView
from .errors import InternalError, InvalidError
from .instruction import InstructionBCL
from .primitives import Int8U


class InstructionRegistry:
    """
    Map instruction classes by name and by opcode.

    Adding a second class with an existing name or opcode raises
    `InternalError`.
    """

    def __init__(self, classes: Iterable[Type[InstructionBCL]] = ()) -> None:
        self._by_name: Dict[str, Type[InstructionBCL]] = dict()
        self._by_opcode: Dict[int, Type[InstructionBCL]] = dict()
        for cls in classes:
            self.add(cls)

    @classmethod
    def from_module(cls, module: ModuleType) -> 'InstructionRegistry':
        """Collect every concrete instruction class exported by `module`."""
        classes = []
        for _, value in sorted(vars(module).items()):
            if inspect.isclass(value) and \
                    issubclass(value, InstructionBCL) and \
                    'NAME' in value.__dict__:
                classes.append(value)
        return cls(classes)

    def __len__(self) -> int:
        return len(self._by_name)

    def add(self, inst: Type[InstructionBCL]) -> None:
        name = inst.NAME
        if name in self._by_name:
            raise InternalError(
                    'Duplicate InstructionBCL name {}'.format(name))
        opcode = inst.OPCODE.value
        if opcode in self._by_opcode:
            raise InternalError(
                    'Duplicate InstructionBCL opcode 0x{:02X}'.format(opcode))
        self._by_name[name] = inst
        self._by_opcode[opcode] = inst

    def by_name(self, name: str) -> Optional[Type[InstructionBCL]]:
        return self._by_name.get(name)

    def by_opcode(self, opcode: int) -> Optional[Type[InstructionBCL]]:
        return self._by_opcode.get(opcode)

    def all_by_name(self) -> Dict[str, Type[InstructionBCL]]:
        return dict(self._by_name)

    def all_by_opcode(self) -> Dict[int, Type[InstructionBCL]]:
        return dict(self._by_opcode)

    def read(self, view: BufferView) -> InstructionBCL:
        """
        Read the next instruction from `view`, choosing its class from the
        opcode byte at the current position.
        """
        opcode = view.get_fixed(Int8U, view.position).value
        inst_cls = self.by_opcode(opcode)
        if inst_cls is None:
            raise InvalidError('Unknown opcode 0x{:02X}'.format(opcode))
        inst = inst_cls()
        inst.read(view)
        return inst
