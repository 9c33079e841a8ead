"""
Source code generator.

The `srcgen` module contains generic helper routines and classes for generating
Python source code.

"""
import sys
import os
from typing import Any, List, Optional


class Formatter:
    """
    Source code formatter class.

    - Collect source code to be written to a file.
    - Keep track of indentation.

    Indentation example:

        >>> f = Formatter()
        >>> f.line('Hello line 1')
        >>> f.writelines()
        Hello line 1
        >>> f.indent_push()
        >>> f.line('# Nested comment')
        >>> f.indent_pop()
        >>> f.format('Back {} again', 'home')
        >>> f.writelines()
        Hello line 1
            # Nested comment
        Back home again

    """

    shiftwidth = 4

    def __init__(self) -> None:
        self.indent = ''
        self.lines: List[str] = []

    def indent_push(self) -> None:
        """Increase current indentation level by one."""
        self.indent += ' ' * self.shiftwidth

    def indent_pop(self) -> None:
        """Decrease indentation by one level."""
        assert self.indent != '', 'Already at top level indentation'
        self.indent = self.indent[0:-self.shiftwidth]

    def line(self, s: Optional[str] = None) -> None:
        """Add an indented line."""
        if s:
            self.lines.append('{}{}\n'.format(self.indent, s))
        else:
            self.lines.append('\n')

    def writelines(self, f: Any = None) -> None:
        """Write all lines to `f`."""
        if not f:
            f = sys.stdout
        f.writelines(self.lines)

    def text(self) -> str:
        """Return all collected lines as a single string."""
        return ''.join(self.lines)

    def update_file(self, filename: str, directory: Optional[str]) -> str:
        """
        Write all lines to `filename` inside `directory`, creating the
        directory if needed. Return the path written.
        """
        if directory is not None:
            os.makedirs(directory, exist_ok=True)
            filename = os.path.join(directory, filename)
        with open(filename, 'w', encoding='utf-8', newline='\n') as f:
            self.writelines(f)
        return filename

    class _IndentedScope:
        def __init__(self, fmt: 'Formatter', after: Optional[str]) -> None:
            self.fmt = fmt
            self.after = after

        def __enter__(self) -> None:
            self.fmt.indent_push()

        def __exit__(self, t, v, tb):
            self.fmt.indent_pop()
            if self.after:
                self.fmt.line(self.after)

    def indented(self, before: Optional[str] = None,
                 after: Optional[str] = None) -> 'Formatter._IndentedScope':
        """
        Return a scope object for use with a `with` statement:

            >>> f = Formatter()
            >>> with f.indented('items = [', ']'):
            ...     f.line('1,')
            >>> f.writelines()
            items = [
                1,
            ]

        The optional `before` and `after` parameters are surrounding lines
        which are *not* indented.
        """
        if before:
            self.line(before)
        return Formatter._IndentedScope(self, after)

    def format(self, fmt: str, *args: Any) -> None:
        self.line(fmt.format(*args))

    def doc_comment(self, s: str) -> None:
        """
        Add a (multi-line) docstring at the current indentation.

            >>> f = Formatter()
            >>> f.doc_comment('Short.')
            >>> f.doc_comment('''
            ...     First line.
            ...
            ...     Second paragraph.
            ...     ''')
            >>> f.writelines()
            \"\"\"Short.\"\"\"
            \"\"\"
            First line.
            <BLANKLINE>
            Second paragraph.
            \"\"\"
        """
        body = [ln.strip() for ln in s.strip('\n').splitlines()]
        while body and not body[-1]:
            body.pop()
        if len(body) == 1:
            self.line('"""{}"""'.format(body[0]))
            return
        self.line('"""')
        for ln in body:
            self.line(ln)
        self.line('"""')

    def blank_lines(self, count: int) -> None:
        """Add `count` empty lines, collapsing with trailing blanks."""
        trailing = 0
        for ln in reversed(self.lines):
            if ln != '\n':
                break
            trailing += 1
        for _ in range(count - trailing):
            self.line()
