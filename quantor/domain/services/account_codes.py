"""Helpers for dot-delimited chart-of-accounts codes."""

from quantor.domain.constants import (
    ACCOUNT_CODE_PADDING,
    ACCOUNT_LEVEL,
    CODE_SEPARATOR,
)


def split_code(code: str) -> list[str]:
    """Split an account code into its segments.

    Args:
        code: Dot-delimited account code such as ``"2.1.001"``.

    Returns:
        list[str]: Raw segments, e.g. ``["2", "1", "001"]``.
    """
    return code.split(CODE_SEPARATOR)


def parse_code_segment(code: str, index: int) -> int | None:
    """Return the integer value of a code segment.

    Args:
        code: Dot-delimited account code.
        index: Zero-based segment position.

    Returns:
        int | None: Parsed value, or None when the segment is missing or is
        not a plain non-negative integer.
    """
    segments = split_code(code)
    if index >= len(segments):
        return None
    segment = segments[index].strip()
    if not segment.isdecimal():
        return None
    return int(segment)


def format_child_code(parent_code: str, number: int, level: int) -> str:
    """Build the code of a child at ``level`` under ``parent_code``.

    Args:
        parent_code: Code of the parent account.
        number: Sequence number of the child among its siblings.
        level: Level of the child being coded.

    Returns:
        str: Child code; leaf accounts are zero-padded to three digits.
    """
    if level >= ACCOUNT_LEVEL:
        segment = str(number).zfill(ACCOUNT_CODE_PADDING)
    else:
        segment = str(number)
    return f"{parent_code}{CODE_SEPARATOR}{segment}"


__all__ = ["split_code", "parse_code_segment", "format_child_code"]
