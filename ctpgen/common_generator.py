"""Common Generator - generates the preambles of the wrapper header and source"""

BANNER = "// AUTO-GENERATED - DO NOT EDIT (delete this file to regenerate)"


class CommonGenerator:
    """Generates the fixed leading lines of wrapper.hpp and wrapper.cpp"""

    def __init__(self, includes: list[str], header_name: str = "wrapper.hpp"):
        self.includes = includes
        self.header_name = header_name

    def header_preamble(self) -> list[str]:
        lines = [
            BANNER,
            "#pragma warning(disable: 4100)",
            "#pragma once",
        ]
        lines.extend(f'#include "{path}"' for path in self.includes)
        lines.append("")
        return lines

    def source_preamble(self) -> list[str]:
        return [
            BANNER,
            "#include <iostream>",
            f'#include "{self.header_name}"',
            "",
        ]
