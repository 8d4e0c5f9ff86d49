#!/usr/bin/env python3
"""
CTP FFI Bridge Generator

Scans the CTP API headers and generates:
  1. src/wrapper.hpp / src/wrapper.cpp (forwarding wrappers and callback adapters)
  2. Rust trait dispatch in place of the bindgen upcall declarations (--bindings)

Usage:
    python bin/generate_bindings.py shared/include/ThostFtdcMdApi.h shared/include/ThostFtdcTraderApi.h
    python bin/generate_bindings.py --bindings src/sys/bindings.rs --force
"""

import sys
from pathlib import Path

# Add parent directory to path so ctpgen package can be found
sys.path.insert(0, str(Path(__file__).parent.parent))

from ctpgen.cli import main


if __name__ == "__main__":
    sys.exit(main())
