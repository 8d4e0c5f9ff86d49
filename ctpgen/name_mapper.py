"""Naming conventions shared by the wrapper generator and the binding rewriter"""

import re

FIRST_BOUNDARY = re.compile(r'(.)([A-Z][a-z]+)')
SECOND_BOUNDARY = re.compile(r'([a-z0-9])([A-Z])')


class NameMapper:
    """Maps native names to generated wrapper, adapter and trait names"""

    def __init__(self, prefix: str = "Rust_"):
        self.prefix = prefix

    def wrapper_class(self, native_class: str) -> str:
        """Rust_CThostFtdcTraderApi"""
        return f"{self.prefix}{native_class}"

    def trait_name(self, native_class: str) -> str:
        """Rust_CThostFtdcTraderSpi_Trait"""
        return f"{self.prefix}{native_class}_Trait"

    def upcall(self, native_class: str, method: str) -> str:
        """Rust_CThostFtdcTraderSpi_Trait_OnFrontConnected"""
        return f"{self.trait_name(native_class)}_{method}"

    @staticmethod
    def to_snake(name: str) -> str:
        """Convert an interface-style name to snake case.

        Examples:
            OnFrontConnected -> on_front_connected
            OnRspQryInstrument -> on_rsp_qry_instrument
            on_front_connected -> on_front_connected
        """
        name = FIRST_BOUNDARY.sub(r'\1_\2', name)
        return SECOND_BOUNDARY.sub(r'\1_\2', name).lower()

    @staticmethod
    def is_opaque_pointer(rust_type: str) -> bool:
        """Check if a bindgen type is `*mut c_void` (any path spelling)"""
        return rust_type.strip().endswith("c_void")
