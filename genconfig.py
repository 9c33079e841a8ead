"""
Generator configuration.

A `GenConfig` is built once by the entry point and passed to every stage that
needs it.
"""
import os
import sys
from typing import Optional, TextIO

import base


class GenConfig:
    """
    Settings for one generator run.

    :param table_path: JSON opcode table to load.
    :param out_dir: Directory receiving the generated units.
    :param extension: File name extension of generated units.
    :param runtime: Import path of the runtime package referenced by units.
    :param index: Also write the manifest as `__init__.py` in `out_dir`.
    :param manifest: Stream receiving the manifest lines.
    """

    def __init__(self, table_path: Optional[str] = None,
                 out_dir: Optional[str] = None, extension: str = '.py',
                 runtime: str = 'bclrt', index: bool = False,
                 manifest: Optional[TextIO] = None) -> None:
        self.table_path = table_path or base.BCL_TABLE
        self.out_dir = out_dir or os.curdir
        self.extension = extension
        self.runtime = runtime
        self.index = index
        self.manifest = manifest if manifest is not None else sys.stdout

    def __repr__(self) -> str:
        return ('GenConfig(table_path={!r}, out_dir={!r}, extension={!r}, '
                'runtime={!r}, index={!r})'.format(
                    self.table_path, self.out_dir, self.extension,
                    self.runtime, self.index))
