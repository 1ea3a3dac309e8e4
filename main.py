#!/usr/bin/env python3
"""
cfzone - Main Entry Point

This is the main entry point for cfzone.
It can be run directly or imported as a module.
"""

import sys

from cfzone.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
