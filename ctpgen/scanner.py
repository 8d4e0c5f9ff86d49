"""Line classifier for simplified C++ interface headers"""

import re
from typing import Iterable, Iterator, Union

from .types import ClassBoundary, MethodLine

Event = Union[ClassBoundary, MethodLine]

# class [EXPORT_MACRO] Name [{]
CLASS_PATTERN = re.compile(r'^\s*class\s+((?:\w+\s+)*\w+)\s*\{?\s*$')
# static/virtual ... ;
METHOD_PATTERN = re.compile(r'^\s*(static|virtual)\s.*;\s*$')
LINE_COMMENT = re.compile(r'//.*$')


class HeaderScanner:
    """Classifies header lines as class boundaries or method declarations.

    Everything else (comments, access specifiers, braces, blank lines) is
    dropped. No brace depth is tracked, so nested classes and declarations
    spanning several lines are not recognized.
    """

    def scan(self, lines: Iterable[str]) -> Iterator[Event]:
        for lineno, raw in enumerate(lines, start=1):
            line = LINE_COMMENT.sub('', raw.rstrip('\r\n'))

            if m := CLASS_PATTERN.match(line):
                yield ClassBoundary(name=m.group(1).split()[-1], lineno=lineno)
            elif METHOD_PATTERN.match(line):
                yield MethodLine(text=self._method_text(line), lineno=lineno)

    def scan_text(self, content: str) -> list[Event]:
        return list(self.scan(content.splitlines()))

    @staticmethod
    def _method_text(line: str) -> str:
        # drop "= 0", "{}" and friends after the parameter list
        end = line.rfind(')')
        if end < 0:
            return line.strip()
        return line[:end + 1].strip()
