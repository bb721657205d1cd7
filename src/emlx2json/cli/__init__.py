"""
CLI module for message conversion.

Provides command-line tools for converting .emlx/.eml files to JSON.
"""

from emlx2json.cli.convert import main as convert_main

__all__ = ["convert_main"]
