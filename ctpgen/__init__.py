"""
CTP FFI Bridge Generator Package

Parses simplified C++ interface headers and generates:
  1. C++ forwarding wrappers for the native API classes
  2. C++ callback adapters relaying SPI upcalls to extern "C" functions
  3. Rust trait dispatch replacing the bindgen upcall declarations
"""

from .types import (
    Modifier, Role, ParameterDecl, MethodSignature, ClassDecl,
    ClassBoundary, MethodLine, GeneratedUnit, ExternDecl, RewriteGroup,
)
from .errors import BridgeGenError, StructuralParseFailure, MissingAdapterGroup, ConventionViolation
from .config import GeneratorConfig
from .scanner import HeaderScanner
from .parser import SignatureParser
from .builder import ClassModelBuilder
from .name_mapper import NameMapper
from .common_generator import CommonGenerator
from .wrapper_generator import DualCodeGenerator
from .binding_rewriter import BindingRewriter
from .build import BridgeBuilder

__all__ = [
    'Modifier', 'Role', 'ParameterDecl', 'MethodSignature', 'ClassDecl',
    'ClassBoundary', 'MethodLine', 'GeneratedUnit', 'ExternDecl', 'RewriteGroup',
    'BridgeGenError', 'StructuralParseFailure', 'MissingAdapterGroup', 'ConventionViolation',
    'GeneratorConfig',
    'HeaderScanner', 'SignatureParser', 'ClassModelBuilder',
    'NameMapper', 'CommonGenerator', 'DualCodeGenerator',
    'BindingRewriter', 'BridgeBuilder',
]
