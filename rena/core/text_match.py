"""
text_match.py - Text Tools

Provides counter padding, extension detection and template expansion
"""

from typing import Optional
import os
import re

from .models_fs import PaddingDirection


# $$, ${name} or $name (name is the longest run of ASCII word characters)
_TEMPLATE_REF = re.compile(r"\$(?:(\$)|\{([^}]*)\}|([_0-9A-Za-z]+))")


def file_extension(name: str) -> str:
    """
    Get extension of a base name, including the dot

    Args:
        name: Base name

    Returns:
        Text after the last dot, or "" when there is none
        (a dotfile's leading dot does not start an extension)
    """
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return ""
    return dot + ext


def pad_counter(number: int, width: int, direction: PaddingDirection) -> str:
    """
    Render a counter with zero padding

    Args:
        number: Counter value
        width: Minimum rendered width
        direction: Where the zeros go

    Returns:
        Padded decimal string (never truncated)
    """
    digits = str(number)
    missing = width - len(digits)
    if missing <= 0:
        return digits

    if direction == PaddingDirection.LEFT:
        return "0" * missing + digits
    elif direction == PaddingDirection.RIGHT:
        return digits + "0" * missing
    else:
        # Middle: odd counts put the extra zero on the right
        left = missing // 2
        return "0" * left + digits + "0" * (missing - left)


def _group_text(match: re.Match, ref: str) -> str:
    """Text of a numbered or named group, "" if absent or unmatched"""
    if ref.isascii() and ref.isdecimal():
        index = int(ref)
        if index > match.re.groups:
            return ""
        return match.group(index) or ""
    return match.groupdict().get(ref) or ""


def expand_template(template: str, match: re.Match) -> str:
    """
    Substitute capture groups into a rename template

    Args:
        template: Template with $N, ${N}, $name, ${name} and $$
        match: Match against the original name

    Returns:
        Expanded text
    """
    def substitute(ref: re.Match) -> str:
        if ref.group(1):
            return "$"
        return _group_text(match, ref.group(2) if ref.group(2) is not None else ref.group(3))

    return _TEMPLATE_REF.sub(substitute, template)


def is_valid_filename(name: str) -> tuple[bool, Optional[str]]:
    """
    Check that a proposed base name stays inside its directory

    Args:
        name: Filename

    Returns:
        (is_valid, error_reason)
    """
    if not name:
        return False, "Filename cannot be empty"

    if name in (".", ".."):
        return False, f"Filename cannot be {name!r}"

    separators = {os.sep, "/"}
    if os.altsep:
        separators.add(os.altsep)
    for sep in separators:
        if sep in name:
            return False, f"Filename contains path separator: {sep}"

    if "\0" in name:
        return False, "Filename contains a NUL character"

    return True, None
