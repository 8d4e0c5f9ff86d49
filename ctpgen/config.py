"""Generator configuration with defaults for the CTP trader/market-data headers"""

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_HEADERS = [
    "shared/include/ThostFtdcMdApi.h",
    "shared/include/ThostFtdcTraderApi.h",
]

DEFAULT_INCLUDES = [
    "../shared/include/DataCollect.h",
    "../shared/include/ThostFtdcUserApiDataType.h",
    "../shared/include/ThostFtdcUserApiStruct.h",
    "../shared/include/ThostFtdcTraderApi.h",
    "../shared/include/ThostFtdcMdApi.h",
]


@dataclass
class GeneratorConfig:
    """Inputs, outputs and naming rules for one generator run"""
    headers: list[str] = field(default_factory=lambda: list(DEFAULT_HEADERS))
    output_dir: str = "src"
    header_name: str = "wrapper.hpp"
    source_name: str = "wrapper.cpp"
    includes: list[str] = field(default_factory=lambda: list(DEFAULT_INCLUDES))

    # classes wrapped as forwarding wrappers / callback adapters
    api_classes: tuple[str, str] = ("CThostFtdcMdApi", "CThostFtdcTraderApi")
    callback_classes: tuple[str, str] = ("CThostFtdcMdSpi", "CThostFtdcTraderSpi")
    factory_methods: tuple[str, str] = ("CreateFtdcMdApi", "CreateFtdcTraderApi")
    prefix: str = "Rust_"

    bindings: str = ""
    bindings_output: str = ""
    adapters: list[str] = field(default_factory=list)

    force: bool = False
    strict: bool = False

    @property
    def header_path(self) -> Path:
        return Path(self.output_dir) / self.header_name

    @property
    def source_path(self) -> Path:
        return Path(self.output_dir) / self.source_name

    @property
    def adapter_names(self) -> list[str]:
        """Trait names the binding rewrite looks for"""
        if self.adapters:
            return list(self.adapters)
        return [f"{self.prefix}{name}_Trait" for name in self.callback_classes]
