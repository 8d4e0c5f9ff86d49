"""Method declaration parser"""

import logging
import re
from typing import Optional

from .errors import StructuralParseFailure
from .types import Modifier, MethodSignature, ParameterDecl

logger = logging.getLogger(__name__)

MODIFIER_PATTERN = re.compile(r'^\s*(static|virtual)\s+')
BOUNDARY_CHARS = ('*', ' ')


class SignatureParser:
    """Parses one `static`/`virtual` declaration line into a MethodSignature.

    The parser is deliberately simple: it takes the first `(` and the first
    `)` after it, so parameters with parenthesized defaults, templates with
    commas and function pointer parameters are not supported.
    """

    def __init__(self, strict: bool = False, source: Optional[str] = None):
        self.strict = strict
        self.source = source

    def parse(self, line: str, lineno: int = 0, require_modifier: bool = True) -> MethodSignature:
        modifier = Modifier.NONE
        rest = line.strip()
        if m := MODIFIER_PATTERN.match(line):
            modifier = Modifier(m.group(1))
            rest = line[m.end():]
        elif require_modifier:
            raise self._fail("missing static/virtual modifier", line, lineno)

        open_paren = rest.find('(')
        if open_paren < 0:
            raise self._fail("missing '('", line, lineno)
        close_paren = rest.find(')', open_paren)
        if close_paren < 0:
            raise self._fail("missing ')'", line, lineno)

        # return type and method name
        head = rest[:open_paren].strip()
        if head.startswith('~'):
            return MethodSignature(modifier=modifier, return_type="", name=head)
        split = self._boundary(head, len(head) - 1)
        if split is None or split == len(head) - 1:
            raise self._fail("cannot separate return type from method name", line, lineno)
        name = head[split + 1:]
        return_type = head[:split + 1].strip()

        params = self._parse_params(rest[open_paren + 1:close_paren].strip(), line, lineno)
        return MethodSignature(
            modifier=modifier,
            return_type=return_type,
            name=name,
            params=params,
        )

    def _parse_params(self, params_str: str, line: str, lineno: int) -> list[ParameterDecl]:
        params = []
        if not params_str:
            return params

        for token in params_str.split(','):
            # remove default value
            assign = token.find('=')
            if assign >= 0:
                token = token[:assign]
            token = token.strip()
            if not token:
                continue

            split = self._boundary(token, len(token) - 1)
            if split is None or split == len(token) - 1:
                if self.strict:
                    raise self._fail(f"parameter {token!r} has no type/name boundary", line, lineno)
                logger.warning("skipping parameter %r without type/name boundary in %r",
                               token, line.strip())
                continue

            params.append(ParameterDecl(
                type_expr=token[:split + 1].strip(),
                name=token[split + 1:].strip(),
            ))

        return params

    @staticmethod
    def _boundary(text: str, start: int) -> Optional[int]:
        """Index of the nearest space or '*' at or before start (index 0 excluded)"""
        for i in range(start, 0, -1):
            if text[i] in BOUNDARY_CHARS:
                return i
        return None

    def _fail(self, reason: str, line: str, lineno: int) -> StructuralParseFailure:
        return StructuralParseFailure(reason, line, source=self.source, lineno=lineno)
