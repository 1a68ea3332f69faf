import pytest

from tgkit.errors import get_error_code, get_flood_wait, is_flood_error, match_error


def test_error_code_both_present():
    err = RuntimeError("see other DC 2 (code 303)")
    assert get_error_code(err) == (2, 303)


def test_error_code_none_and_missing():
    assert get_error_code(None) == (0, 0)
    assert get_error_code(ValueError("nothing useful")) == (0, 0)


@pytest.mark.parametrize(
    "message, expected",
    [
        ("A wait of 15 seconds is required", 15),
        ("rpc error FLOOD_WAIT_30", 30),
        ("FLOOD_PREMIUM_WAIT_7", 7),
        ("PEER_ID_INVALID", 0),
    ],
)
def test_flood_wait(message, expected):
    assert get_flood_wait(Exception(message)) == expected


def test_flood_wait_none():
    assert get_flood_wait(None) == 0


def test_match_error():
    assert match_error(Exception("FILE_PART_INVALID"), "PART_")
    assert not match_error(Exception("FILE_PART_INVALID"), "FLOOD")
    assert not match_error(None, "anything")


def test_is_flood_error():
    assert is_flood_error(Exception("FLOOD_WAIT_3"))
    assert is_flood_error(Exception("FLOOD_PREMIUM_WAIT_3"))
    assert not is_flood_error(Exception("A wait of 3 seconds is required"))
    assert not is_flood_error(None)