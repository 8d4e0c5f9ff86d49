"""Groups scanned method lines into classes"""

import logging
from typing import Iterable, Optional

from .parser import SignatureParser
from .scanner import Event, HeaderScanner
from .types import ClassBoundary, ClassDecl, MethodLine

logger = logging.getLogger(__name__)


class ClassModelBuilder:
    """Builds ClassDecls from a HeaderScanner event stream"""

    def __init__(self, parser: Optional[SignatureParser] = None):
        self.parser = parser or SignatureParser()

    def build(self, events: Iterable[Event]) -> list[ClassDecl]:
        classes = []
        current: Optional[ClassDecl] = None

        for event in events:
            if isinstance(event, ClassBoundary):
                if current is not None:
                    classes.append(current)
                current = ClassDecl(name=event.name)
            elif isinstance(event, MethodLine):
                if current is None:
                    logger.info("skipping method outside of any class (line %d): %s",
                                event.lineno, event.text)
                    continue
                current.methods.append(self.parser.parse(event.text, lineno=event.lineno))

        if current is not None:
            classes.append(current)
        return classes

    def build_text(self, content: str, scanner: Optional[HeaderScanner] = None) -> list[ClassDecl]:
        scanner = scanner or HeaderScanner()
        return self.build(scanner.scan(content.splitlines()))
