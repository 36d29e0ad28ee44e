#!/usr/bin/env python3
"""
Main entry point for fivem-utility when run as a module.

This allows the package to be executed with: python -m fivem_util
"""

from .cli import main

if __name__ == '__main__':
    main()
