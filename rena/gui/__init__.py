"""
gui - PySide6 front-end for rena
"""

from .gui_entry import main

__all__ = ["main"]
