"""Matching update text and callback data against handler patterns."""

from __future__ import annotations

import re
from typing import Any, Optional, Union

from tgkit.types import User

ON_NEW_MESSAGE = "OnNewMessage"
ON_EDIT_MESSAGE = "OnEditMessage"
ON_DELETE_MESSAGE = "OnDeleteMessage"
ON_INLINE_QUERY = "OnInlineQuery"
ON_CALLBACK_QUERY = "OnCallbackQuery"
ON_INLINE_CALLBACK_QUERY = "OnInlineCallbackQuery"

_LEADING_FLAGS = re.compile(r"(?:\(\?[aiLmsux]+\))+")


def _compile(pattern: str) -> re.Pattern[str]:
    """Compile a pattern, moving inline flag groups that follow '^' to the front."""
    if pattern.startswith("^"):
        flags = _LEADING_FLAGS.match(pattern, 1)
        if flags:
            pattern = flags.group(0) + "^" + pattern[flags.end():]
    return re.compile(pattern)


def _anchored(pattern: str) -> str:
    return pattern if pattern.startswith("^") else "^" + pattern


def _as_text(data: Union[bytes, str]) -> str:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8", "replace")
    return data


def _search_compiled(pattern: re.Pattern, data: Union[bytes, str]) -> bool:
    if isinstance(pattern.pattern, bytes):
        raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        return pattern.search(raw) is not None
    return pattern.search(_as_text(data)) is not None


def match_message_pattern(pattern: Any, text: str, me: Optional[User]) -> bool:
    """Match a new-message pattern; ``cmd:<name>`` patterns match bot commands."""
    if isinstance(pattern, re.Pattern):
        return _search_compiled(pattern, text)
    if not isinstance(pattern, str):
        return False
    if pattern == ON_NEW_MESSAGE:
        return True

    if pattern.startswith("cmd:"):
        expression = "(?i)^[!/]" + pattern[len("cmd:"):]
        if me is not None and me.username and me.bot:
            expression += "(?: |$|@" + me.username + ")(.*)"
        else:
            expression += "(.*)"
    else:
        expression = _anchored(pattern)

    return _compile(expression).search(text) is not None or text.startswith(expression)


def match_edit_pattern(pattern: Any, text: str) -> bool:
    """Match an edited-message pattern against the message text."""
    if isinstance(pattern, re.Pattern):
        return _search_compiled(pattern, text)
    if not isinstance(pattern, str):
        return False
    if pattern == ON_EDIT_MESSAGE:
        return True
    return _compile("^" + pattern).search(text) is not None or text.startswith(pattern)


def match_inline_pattern(pattern: Any, text: str) -> bool:
    """Match an inline-query pattern against the query text."""
    if isinstance(pattern, re.Pattern):
        return _search_compiled(pattern, text)
    if not isinstance(pattern, str):
        return False
    if pattern == ON_INLINE_QUERY:
        return True
    expression = _anchored(pattern)
    return _compile(expression).search(text) is not None or text.startswith(expression)


def _match_data(pattern: Any, data: Union[bytes, str], catch_all: str) -> bool:
    if isinstance(pattern, re.Pattern):
        return _search_compiled(pattern, data)
    if not isinstance(pattern, str):
        return False
    if pattern == catch_all:
        return True
    text = _as_text(data)
    return _compile(pattern).search(text) is not None or text.startswith(pattern)


def match_callback_pattern(pattern: Any, data: Union[bytes, str]) -> bool:
    """Match a callback-query pattern against the button data."""
    return _match_data(pattern, data, ON_CALLBACK_QUERY)


def match_inline_callback_pattern(pattern: Any, data: Union[bytes, str]) -> bool:
    """Match an inline callback-query pattern against the button data."""
    return _match_data(pattern, data, ON_INLINE_CALLBACK_QUERY)