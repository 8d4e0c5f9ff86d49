"""Binding Rewriter - turns bindgen upcall declarations into Rust traits.

bindgen emits every `extern "C"` upcall declared in wrapper.hpp as a raw
foreign function:

    extern "C" {
        pub fn Rust_CThostFtdcTraderSpi_Trait_OnFrontConnected(rust: *mut ::std::os::raw::c_void);
    }

For each adapter this pass replaces those blocks with

  * a trait `Rust_CThostFtdcTraderSpi_Trait` with one no-op method per
    upcall (`on_front_connected`),
  * one `#[no_mangle]` export per upcall that casts the opaque pointer back
    to `*mut Box<dyn Trait>` and calls the trait method,
  * `Rust_CThostFtdcTraderSpi_Trait_Drop`, which reclaims the boxed trait
    object. Calling it twice for the same pointer is a double free.

Only the matched blocks change; all other text is kept byte for byte.
"""

import logging
import re

from .errors import ConventionViolation, MissingAdapterGroup, StructuralParseFailure
from .name_mapper import NameMapper
from .types import ExternDecl, RewriteGroup

logger = logging.getLogger(__name__)

ARG_PATTERN = re.compile(r'\s*(\w+)\s*:\s*(.*?)\s*')
OPAQUE_PTR = "*mut ::std::os::raw::c_void"
RESERVED_DROP = "drop"


def extern_pattern(adapter: str) -> re.Pattern:
    """Pattern matching one single-function extern block of an adapter"""
    return re.compile(
        r'extern\s+"C"\s*\{\s*pub\s+fn\s+'
        + re.escape(adapter)
        + r'_(\w+)\s*\(([^)]*)\)([^;]*);\s*\}[ \t]*\n?'
    )


class BindingRewriter:
    """Rewrites grouped extern declarations into trait dispatch code"""

    def rewrite(self, binding_source: str, adapter_names: list[str]) -> str:
        buf = binding_source
        for adapter in adapter_names:
            group = self.collect(buf, adapter)
            buf = self._splice(buf, group, self.render(group))
            logger.info("rewrote %d upcall declarations of %s", len(group.decls), adapter)
        return buf

    def collect(self, source: str, adapter: str) -> RewriteGroup:
        group = RewriteGroup(adapter=adapter)
        for m in extern_pattern(adapter).finditer(source):
            group.decls.append(ExternDecl(
                method_name=m.group(1).strip(),
                params=self._parse_args(adapter, m.group(2)),
                return_text=m.group(3).strip(),
                span=m.span(),
            ))
        if not group.decls:
            raise MissingAdapterGroup(adapter)
        return group

    def _parse_args(self, adapter: str, args: str) -> list[tuple[str, str]]:
        params = []
        for token in args.split(','):
            if not token.strip():
                continue
            m = ARG_PATTERN.fullmatch(token)
            if m is None:
                raise StructuralParseFailure("unparseable extern parameter", token, source=adapter)
            params.append((m.group(1), m.group(2)))
        return params

    def render(self, group: RewriteGroup) -> str:
        adapter = group.adapter
        trait_fns = []
        exports = []

        for decl in group.decls:
            if not decl.params or not NameMapper.is_opaque_pointer(decl.params[0][1]):
                found = decl.params[0][1] if decl.params else "<no parameters>"
                raise ConventionViolation(adapter, decl.method_name, found)

            snake = NameMapper.to_snake(decl.method_name)
            if snake == RESERVED_DROP:
                logger.debug("%s_%s is reserved for the destructor export", adapter, decl.method_name)
                continue

            rest = decl.params[1:]
            ret = f" {decl.return_text}" if decl.return_text else ""
            typed = [f"{name}: {ty}" for name, ty in rest]
            forward = ", ".join(name for name, _ in rest)
            default_body = "{ Default::default() }" if decl.return_text else "{  }"

            trait_fns.append(
                f"    fn {snake}({', '.join(['&mut self'] + typed)}){ret} {default_body}"
            )
            exports.extend([
                "#[no_mangle]",
                f'pub extern "C" fn {adapter}_{decl.method_name}'
                f"({', '.join([f'trait_ptr: {OPAQUE_PTR}'] + typed)}){ret} {{",
                f"    let ptr = trait_ptr as *mut Box<dyn {adapter}>;",
                f"    let trait_obj: &mut dyn {adapter} = unsafe {{ &mut **ptr }};",
                f"    trait_obj.{snake}({forward})",
                "}",
                "",
            ])

        lines = [
            "#[allow(unused)]",
            f"pub trait {adapter} {{",
            *trait_fns,
            "}",
            "",
            *exports,
            "#[no_mangle]",
            f'pub extern "C" fn {adapter}_Drop(trait_obj: {OPAQUE_PTR}) {{',
            f"    let trait_obj = trait_obj as *mut Box<dyn {adapter}>;",
            f"    let _r: Box<Box<dyn {adapter}>> = unsafe {{ Box::from_raw(trait_obj) }};",
            "}",
            "",
            "",
        ]
        return "\n".join(lines)

    @staticmethod
    def _splice(source: str, group: RewriteGroup, block: str) -> str:
        """Replace the first declaration span with block and drop the others"""
        pieces = []
        cursor = 0
        for i, decl in enumerate(group.decls):
            start, end = decl.span
            pieces.append(source[cursor:start])
            if i == 0:
                pieces.append(block)
            cursor = end
        pieces.append(source[cursor:])
        return "".join(pieces)
