#!/usr/bin/env python3
"""
Entry point for running quagga_gen as a module
This allows running: python -m quagga_gen
"""

from .cli import app

if __name__ == "__main__":
    app()
