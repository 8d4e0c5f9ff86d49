"""Runs the generator pipeline and writes its outputs"""

import logging
from pathlib import Path
from typing import Optional

from .binding_rewriter import BindingRewriter
from .builder import ClassModelBuilder
from .config import GeneratorConfig
from .parser import SignatureParser
from .scanner import HeaderScanner
from .types import ClassDecl, GeneratedUnit
from .wrapper_generator import DualCodeGenerator

logger = logging.getLogger(__name__)


def write_atomic(path: Path, content: str):
    """Write content to path through a temporary sibling file"""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_text(content)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise
    tmp.replace(path)


class BridgeBuilder:
    """Header scan -> class model -> wrapper.hpp/.cpp, plus the binding rewrite.

    Wrapper generation is skipped while the wrapper header exists (delete it
    or pass force to regenerate). Nothing is written unless the whole step
    succeeded.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self.scanner = HeaderScanner()
        self.generator = DualCodeGenerator(self.config)
        self.rewriter = BindingRewriter()

    def load_classes(self) -> list[ClassDecl]:
        classes = []
        for header in self.config.headers:
            path = Path(header)
            parser = SignatureParser(strict=self.config.strict, source=str(path))
            builder = ClassModelBuilder(parser)
            found = builder.build(self.scanner.scan(path.read_text(errors="replace").splitlines()))
            logger.debug("%s: %d classes", path, len(found))
            classes.extend(found)
        return classes

    def generate_unit(self) -> GeneratedUnit:
        return self.generator.generate(self.load_classes())

    def wrapper_outputs(self) -> dict[Path, str]:
        """Wrapper header and source text by path, empty while the header exists"""
        header_path = self.config.header_path
        if header_path.exists() and not self.config.force:
            logger.info("%s exists, skipping wrapper generation", header_path)
            return {}

        unit = self.generate_unit()
        return {
            header_path: unit.header_text(),
            self.config.source_path: unit.source_text(),
        }

    def binding_outputs(self, bindings: Optional[str] = None, output: Optional[str] = None) -> dict[Path, str]:
        """Rewritten bindgen output by path, empty when no bindings are configured"""
        bindings = bindings or self.config.bindings
        if not bindings:
            return {}
        source = Path(bindings)
        target = Path(output or self.config.bindings_output or bindings)
        return {target: self.rewriter.rewrite(source.read_text(), self.config.adapter_names)}

    @staticmethod
    def write_outputs(outputs: dict[Path, str]) -> list[Path]:
        for path, content in outputs.items():
            write_atomic(path, content)
        return list(outputs)

    def generate_wrapper(self) -> list[Path]:
        """Generate wrapper header and source. Returns the written paths."""
        return self.write_outputs(self.wrapper_outputs())

    def rewrite_bindings(self, bindings: Optional[str] = None, output: Optional[str] = None) -> Optional[Path]:
        """Rewrite the adapter upcall declarations of a bindgen output file"""
        written = self.write_outputs(self.binding_outputs(bindings, output))
        return written[0] if written else None

    def run(self) -> list[Path]:
        """Generate every output first, then write them all"""
        outputs = self.wrapper_outputs()
        outputs.update(self.binding_outputs())
        return self.write_outputs(outputs)
