#!/usr/bin/env python3
"""
Entry point for running the CLI as a module.

Usage:
    python -m gambit7702 accept --keyfile ... --rpc ... --target ... --account ...
"""
from gambit7702.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
