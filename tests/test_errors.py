import pytest
from hypothesis import given
from hypothesis import strategies as st

from traa.errors import ErrorCode, TraaError


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, ErrorCode.NONE),
        (2, ErrorCode.INVALID_ARGUMENT),
        (4, ErrorCode.NOT_IMPLEMENTED),
        (20, ErrorCode.ALREADY_INITIALIZED),
        (21, ErrorCode.ENUM_SCREEN_SOURCE_INFO_FAILED),
    ],
)
def test_documented_code_values(value, expected):
    assert TraaError(value).code is expected


def test_codes_are_contiguous_and_count_is_last():
    members = list(ErrorCode)
    assert [ErrorCode(i) for i in range(len(members))] == members
    assert ErrorCode(len(members) - 1) is ErrorCode.COUNT


def test_error_carries_code_and_message():
    error = TraaError(ErrorCode.NOT_FOUND, "missing")
    assert isinstance(error, Exception)
    assert error.code is ErrorCode.NOT_FOUND
    assert error.message == "missing"


def test_error_accepts_integer_code():
    error = TraaError(int(ErrorCode.NOT_FOUND), "missing")
    assert error.code is ErrorCode.NOT_FOUND


def test_error_rejects_unknown_code():
    with pytest.raises(ValueError):
        TraaError(1000, "bad")


def test_error_text_names_code_and_message():
    text = str(TraaError(ErrorCode.TIMED_OUT, "waited too long"))
    assert "TIMED_OUT" in text
    assert "waited too long" in text


def test_error_text_without_message_is_code_name():
    assert str(TraaError(ErrorCode.UNKNOWN)) == "UNKNOWN"


@given(st.sampled_from(list(ErrorCode)), st.text())
def test_error_round_trips_any_code(code, message):
    error = TraaError(int(code), message)
    assert error.code is code
    assert error.message == message