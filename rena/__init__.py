"""
rena - Batch rename the entries of a directory

Numbers entries ({prefix}_{counter}{ext}) or rewrites their names through
regex capture groups, without ever overwriting an existing entry.
"""

__version__ = "1.0.0"
