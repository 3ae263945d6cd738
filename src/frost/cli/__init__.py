"""
Frost Command-Line Interface
============================

- **frostlex**: token dumper for Frost source files

Implemented as a Click-based CLI application.
"""

__all__ = ["frostlex"]
