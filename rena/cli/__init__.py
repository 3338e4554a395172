"""
cli - Command Line Interface for rena
"""

from .cli_entry import main, create_parser, parse_args

__all__ = ["main", "create_parser", "parse_args"]
