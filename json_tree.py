#!/usr/bin/env python3
"""
JSON Tree Validator

This script parses a JSON document into a value tree and validates it
against the built-in webserver configuration schema.

Usage:
    python json_tree.py <json_file> [--print] [--color] [--max-errors N] [--verbose]
"""

import sys

from json_tree.cli import main

if __name__ == "__main__":
    sys.exit(main())
