import re

import pytest

from tgkit.patterns import (
    ON_CALLBACK_QUERY,
    ON_EDIT_MESSAGE,
    ON_INLINE_CALLBACK_QUERY,
    ON_INLINE_QUERY,
    ON_NEW_MESSAGE,
    match_callback_pattern,
    match_edit_pattern,
    match_inline_callback_pattern,
    match_inline_pattern,
    match_message_pattern,
)
from tgkit.types import User


def test_catch_all_sentinels_match_anything():
    assert match_message_pattern(ON_NEW_MESSAGE, "whatever", None) is True
    assert match_edit_pattern(ON_EDIT_MESSAGE, "") is True
    assert match_inline_pattern(ON_INLINE_QUERY, "q") is True
    assert match_callback_pattern(ON_CALLBACK_QUERY, b"x") is True
    assert match_inline_callback_pattern(ON_INLINE_CALLBACK_QUERY, b"x") is True


@pytest.mark.parametrize(
    "pattern, text, expected",
    [
        ("hello", "hello world", True),
        ("hello", "say hello", False),
        ("^hi", "hi there", True),
        ("(?i)hello", "HELLO", True),
    ],
)
def test_message_pattern_is_anchored(pattern, text, expected):
    assert match_message_pattern(pattern, text, None) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("/start", True),
        ("!START now", True),
        ("/startx", True),
        ("start", False),
        ("?start", False),
    ],
)
def test_command_pattern_without_bot_identity(text, expected):
    assert match_message_pattern("cmd:start", text, None) is expected


def test_command_pattern_for_bot_requires_boundary():
    me = User(username="mybot", bot=True)
    assert match_message_pattern("cmd:start", "/start", me) is True
    assert match_message_pattern("cmd:start", "/start@mybot", me) is True
    assert match_message_pattern("cmd:start", "/start args", me) is True
    assert match_message_pattern("cmd:start", "/startx", me) is False


def test_command_pattern_for_non_bot_user_ignores_username():
    me = User(username="someone", bot=False)
    assert match_message_pattern("cmd:start", "/startx", me) is True


def test_compiled_patterns_search_anywhere():
    assert match_message_pattern(re.compile("world"), "hello world", None) is True
    assert match_edit_pattern(re.compile("^world"), "hello world") is False
    assert match_inline_pattern(re.compile("b"), "abc") is True


def test_unsupported_pattern_types_never_match():
    assert match_message_pattern(42, "42", None) is False
    assert match_edit_pattern(None, "x") is False
    assert match_inline_pattern(3.5, "x") is False
    assert match_callback_pattern(None, b"x") is False


def test_edit_falls_back_to_literal_prefix():
    assert match_edit_pattern("a+b", "a+b c") is True
    assert match_edit_pattern("abc", "xabc") is False


def test_inline_pattern():
    assert match_inline_pattern("search", "search cats") is True
    assert match_inline_pattern("search", "do search") is False


def test_callback_pattern_searches_data():
    assert match_callback_pattern(r"vote_\d+", b"vote_12") is True
    assert match_callback_pattern(r"vote_\d+", b"other") is False
    assert match_callback_pattern("ok", b"not ok") is True
    assert match_callback_pattern("x", b"\xff\xfe") is False


def test_callback_compiled_bytes_and_text_patterns():
    assert match_callback_pattern(re.compile(rb"^a"), b"abc") is True
    assert match_inline_callback_pattern(re.compile(r"^a"), b"abc") is True
    assert match_inline_callback_pattern(re.compile(r"^z"), "abc") is False


def test_invalid_regex_raises():
    with pytest.raises(re.error):
        match_edit_pattern("(", "x")