"""
Command line entry point.

Usage:
    ctpgen shared/include/ThostFtdcMdApi.h shared/include/ThostFtdcTraderApi.h -o src
    ctpgen --bindings src/sys/bindings.rs --force
"""

import argparse
import logging
import sys
import time
from typing import Optional

from .build import BridgeBuilder
from .config import GeneratorConfig, DEFAULT_HEADERS, DEFAULT_INCLUDES
from .errors import BridgeGenError

logger = logging.getLogger("ctpgen")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate C++ wrappers and Rust trait bindings from CTP headers")
    parser.add_argument("headers", nargs="*", help=f"Header files to scan (default: {' '.join(DEFAULT_HEADERS)})")
    parser.add_argument("--output-dir", "-o", default="src", help="Output directory for the wrapper")
    parser.add_argument("--header-name", default="wrapper.hpp", help="Generated header file name")
    parser.add_argument("--source-name", default="wrapper.cpp", help="Generated source file name")
    parser.add_argument("--prefix", default="Rust_", help="Prefix of generated wrapper classes")
    parser.add_argument("--include", action="append", default=[], help="Include line for the header (repeatable)")
    parser.add_argument("--bindings", default="", help="bindgen output to rewrite")
    parser.add_argument("--bindings-output", default="", help="Where to write the rewritten bindings (default: in place)")
    parser.add_argument("--adapter", action="append", default=[], help="Adapter trait name to rewrite (repeatable)")
    parser.add_argument("--force", action="store_true", help="Regenerate the wrapper even if it exists")
    parser.add_argument("--strict", action="store_true", help="Fail on parameters without a type/name boundary")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    return GeneratorConfig(
        headers=args.headers or list(DEFAULT_HEADERS),
        output_dir=args.output_dir,
        header_name=args.header_name,
        source_name=args.source_name,
        includes=args.include or list(DEFAULT_INCLUDES),
        prefix=args.prefix,
        bindings=args.bindings,
        bindings_output=args.bindings_output,
        adapters=args.adapter,
        force=args.force,
        strict=args.strict,
    )


def main(argv: Optional[list[str]] = None) -> int:
    start_time = time.perf_counter()

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        written = BridgeBuilder(config_from_args(args)).run()
    except (BridgeGenError, OSError) as e:
        logger.error("generation failed: %s", e)
        return 1

    for path in written:
        print(f"Generated: {path}")

    elapsed = time.perf_counter() - start_time
    print(f"Generation completed in {elapsed*1000:.2f} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
