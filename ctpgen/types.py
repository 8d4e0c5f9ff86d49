"""Data types for header parsing, wrapper generation and binding rewrite"""

from dataclasses import dataclass, field
from enum import Enum


class Modifier(Enum):
    """Leading keyword of a method declaration"""
    NONE = ""
    STATIC = "static"
    VIRTUAL = "virtual"


class Role(Enum):
    """Generation role of a class, derived from its name"""
    API = "api"
    CALLBACK = "callback"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class ParameterDecl:
    """Method parameter"""
    type_expr: str
    name: str

    @property
    def forward_name(self) -> str:
        """Name usable at a call site (array suffix removed)"""
        index = self.name.find("[]")
        if index >= 0:
            return self.name[:index]
        return self.name


@dataclass
class MethodSignature:
    """Parsed method declaration"""
    modifier: Modifier
    return_type: str
    name: str
    params: list[ParameterDecl] = field(default_factory=list)

    @property
    def declare(self) -> str:
        return ", ".join(f"{p.type_expr} {p.name}" for p in self.params)

    @property
    def forward_args(self) -> str:
        return ", ".join(p.forward_name for p in self.params)

    @property
    def is_static(self) -> bool:
        return self.modifier is Modifier.STATIC

    @property
    def is_destructor(self) -> bool:
        return self.name.startswith("~")


@dataclass
class ClassDecl:
    """Class with its methods in declaration order"""
    name: str
    methods: list[MethodSignature] = field(default_factory=list)


@dataclass(frozen=True)
class ClassBoundary:
    """Scanner event: a line opening a class"""
    name: str
    lineno: int = 0


@dataclass(frozen=True)
class MethodLine:
    """Scanner event: a modifier-prefixed method declaration"""
    text: str
    lineno: int = 0


@dataclass
class GeneratedUnit:
    """Accumulated wrapper header and source text"""
    declarations: list[str] = field(default_factory=list)
    definitions: list[str] = field(default_factory=list)

    def header_text(self) -> str:
        return "\n".join(self.declarations)

    def source_text(self) -> str:
        return "\n".join(self.definitions)


@dataclass
class ExternDecl:
    """One raw `extern "C"` upcall declaration found in binding source"""
    method_name: str
    params: list[tuple[str, str]]
    return_text: str
    span: tuple[int, int]


@dataclass
class RewriteGroup:
    """All extern declarations belonging to one adapter"""
    adapter: str
    decls: list[ExternDecl] = field(default_factory=list)
