# Build script.
#
# Generates one Python module per bytecode instruction from an opcode table,
# and prints the lines of the package index on stdout.

import argparse
import logging
import sys
from typing import List, Optional

import gen_units
from bdsl import SchemaError
from genconfig import GenConfig

log = logging.getLogger('build_bcl')


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
            description='Generate bytecode instruction units.')
    parser.add_argument('--table', help='opcode table (JSON)')
    parser.add_argument('--out-dir', help='set output directory')
    parser.add_argument(
            '--index', action='store_true',
            help='also write the package __init__.py to the output directory')
    parser.add_argument(
            '--runtime', default='bclrt',
            help='runtime package imported by the generated units')
    parser.add_argument(
            '-v', '--verbose', action='store_true', help='debug logging')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format='%(levelname)s %(name)s: %(message)s',
            stream=sys.stderr)

    config = GenConfig(
            table_path=args.table,
            out_dir=args.out_dir,
            runtime=args.runtime,
            index=args.index)
    log.debug('%r', config)

    try:
        gen_units.generate_file(config)
    except SchemaError as e:
        log.error('%s: %s', config.table_path, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
