"""Helpers that read details out of server error messages."""

from __future__ import annotations

import re

_DATACENTER = re.compile(r"DC ([0-9]+)")
_CODE = re.compile(r"code ([0-9]+)")

_FLOOD_WAIT_PATTERNS = (
    re.compile(r"A wait of ([0-9]+) seconds is required"),
    re.compile(r"FLOOD_WAIT_([0-9]+)"),
    re.compile(r"FLOOD_PREMIUM_WAIT_([0-9]+)"),
)


def _text(error: object) -> str | None:
    if error is None:
        return None
    return str(error)


def get_error_code(error: object) -> tuple[int, int]:
    """Return ``(datacenter, code)`` found in the error text, zero where absent."""
    text = _text(error)
    if text is None:
        return 0, 0
    dc_match = _DATACENTER.search(text)
    code_match = _CODE.search(text)
    datacenter = int(dc_match.group(1)) if dc_match else 0
    code = int(code_match.group(1)) if code_match else 0
    return datacenter, code


def get_flood_wait(error: object) -> int:
    """Return the number of seconds a flood-wait error asks for, or 0."""
    text = _text(error)
    if text is None:
        return 0
    for pattern in _FLOOD_WAIT_PATTERNS:
        found = pattern.search(text)
        if found:
            return int(found.group(1))
    return 0


def match_error(error: object, text: str) -> bool:
    """True if the error's message contains ``text``."""
    message = _text(error)
    return message is not None and text in message


def is_flood_error(error: object) -> bool:
    """True if the error is a plain or premium flood-wait error."""
    return match_error(error, "FLOOD_WAIT_") or match_error(error, "FLOOD_PREMIUM_WAIT_")