"""Wrapper Generator - generates the C++ forwarding wrappers and callback adapters"""

import logging
from typing import Optional

from .common_generator import CommonGenerator
from .config import GeneratorConfig
from .name_mapper import NameMapper
from .types import ClassDecl, GeneratedUnit, MethodSignature, Role

logger = logging.getLogger(__name__)


class DualCodeGenerator:
    """Emits one artifact shape per class role into a GeneratedUnit.

    API classes get a wrapper owning the native pointer returned by the
    factory; callback (SPI) classes get an adapter deriving from the native
    interface that relays every call to an `extern "C"` upcall together
    with an opaque host pointer it does not own.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self.names = NameMapper(self.config.prefix)
        self.common = CommonGenerator(self.config.includes, self.config.header_name)

    def role_of(self, cls: ClassDecl) -> Role:
        if cls.name in self.config.api_classes:
            return Role.API
        if cls.name in self.config.callback_classes:
            return Role.CALLBACK
        return Role.UNRECOGNIZED

    def generate(self, classes: list[ClassDecl]) -> GeneratedUnit:
        unit = GeneratedUnit(
            declarations=self.common.header_preamble(),
            definitions=self.common.source_preamble(),
        )

        for cls in classes:
            role = self.role_of(cls)
            if role is Role.API:
                self._generate_api(cls, unit)
            elif role is Role.CALLBACK:
                self._generate_callback(cls, unit)
            else:
                logger.info("skipping class %s: not an API or callback class", cls.name)

        return unit

    def _methods(self, cls: ClassDecl) -> list[MethodSignature]:
        methods = []
        for method in cls.methods:
            if method.is_destructor:
                logger.debug("skipping destructor %s::%s", cls.name, method.name)
                continue
            methods.append(method)
        return methods

    def _generate_api(self, cls: ClassDecl, unit: GeneratedUnit):
        wrapper = self.names.wrapper_class(cls.name)
        header = unit.declarations
        body = unit.definitions

        header.append(f"class {wrapper} {{")
        header.append("public:")

        for f in self._methods(cls):
            if f.is_static and f.name in self.config.factory_methods:
                header.append(f"    static {wrapper}* {f.name}({f.declare});")
                body.extend([
                    f"{wrapper}* {wrapper}::{f.name}({f.declare}) {{",
                    f"    {wrapper}* self = new {wrapper}();",
                    f"    self->inner = {cls.name}::{f.name}({f.forward_args});",
                    "    return self;",
                    "}",
                ])
            elif f.is_static:
                header.append(f"    static {f.return_type} {f.name}({f.declare});")
                body.append(
                    f"{f.return_type} {wrapper}::{f.name}({f.declare}) "
                    f"{{ return {cls.name}::{f.name}({f.forward_args}); }}"
                )
            else:
                header.append(f"    {f.return_type} {f.name}({f.declare});")
                body.append(
                    f"{f.return_type} {wrapper}::{f.name}({f.declare}) "
                    f"{{ return inner->{f.name}({f.forward_args}); }}"
                )

        header.append("private:")
        header.append(f"    {cls.name} * inner = nullptr;")
        header.append("};")
        header.append("")
        body.append("")

    def _generate_callback(self, cls: ClassDecl, unit: GeneratedUnit):
        adapter = self.names.wrapper_class(cls.name)
        header = unit.declarations
        body = unit.definitions

        header.append(f"class {adapter} : public {cls.name} {{")
        header.append("public:")

        # Create / Destroy
        header.append(f"    static {cls.name}* Create(void * trait);")
        body.extend([
            f"{cls.name}* {adapter}::Create(void * trait) {{",
            f"    {adapter}* p = new {adapter}();",
            "    p->rust = trait;",
            "    return p;",
            "}",
        ])
        header.append(f"    static void Destroy({cls.name}* ptr);")
        body.append(
            f"void {adapter}::Destroy({cls.name}* ptr) {{ delete static_cast<{adapter}*>(ptr); }}"
        )

        upcalls = []
        for f in self._methods(cls):
            upcall = self.names.upcall(cls.name, f.name)
            header.append(f"    {f.return_type} {f.name}({f.declare}) override;")

            upcall_params = "void * rust, " + f.declare if f.params else "void * rust"
            upcalls.append(f'extern "C" {f.return_type} {upcall}({upcall_params});')

            upcall_args = "rust, " + f.forward_args if f.params else "rust"
            body.append(
                f"{f.return_type} {adapter}::{f.name}({f.declare}) "
                f"{{ return {upcall}({upcall_args}); }}"
            )

        header.append("private:")
        header.append("    void * rust = nullptr;")
        header.append("};")
        header.append("")
        header.extend(upcalls)
        if upcalls:
            header.append("")
        body.append("")
