"""
Definitions of the bytecode instruction set.

`bcl.json` is the opcode table of the bytecode class library. Each row is
`[opcode_hex, name, [argtypes]]`, where the argument types are the tags of
:py:mod:`bdsl.argtypes`.
"""
import os

#: Path of the default opcode table.
BCL_TABLE = os.path.join(
        os.path.dirname(os.path.abspath(__file__)), 'bcl.json')
