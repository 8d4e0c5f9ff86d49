"""Generator errors. Every one of them aborts the run."""

from typing import Optional


class BridgeGenError(Exception):
    """Base class for generation failures"""


class StructuralParseFailure(BridgeGenError):
    """A declaration line does not have the expected shape"""

    def __init__(self, reason: str, line: str, source: Optional[str] = None, lineno: int = 0):
        self.reason = reason
        self.line = line
        self.source = source
        self.lineno = lineno
        super().__init__(str(self))

    def __str__(self) -> str:
        where = ""
        if self.source:
            where = f"{self.source}:{self.lineno}: " if self.lineno else f"{self.source}: "
        return f"{where}{self.reason}: {self.line.strip()!r}"


class MissingAdapterGroup(BridgeGenError, AssertionError):
    """No extern declaration was found for a requested adapter"""

    def __init__(self, adapter: str):
        self.adapter = adapter
        super().__init__(f"`{adapter}` not found in source code")


class ConventionViolation(BridgeGenError, AssertionError):
    """An upcall declaration does not take the opaque trait pointer first"""

    def __init__(self, adapter: str, method: str, found: str):
        self.adapter = adapter
        self.method = method
        self.found = found
        super().__init__(
            f"{adapter}_{method}: first parameter must be `*mut c_void`, found {found!r}"
        )
