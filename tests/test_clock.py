from datetime import datetime, timedelta, timezone

import pytest

from barblocks.clock import DEFAULT_FORMAT, get_time


def test_plain_text_passes_through():
    assert get_time("plain text", "UTC") == "plain text"


def test_percent_escape():
    assert get_time("100%%", "UTC") == "100%"


def test_utc_offset_is_zero():
    assert get_time("%z", "UTC") == "+0000"


def test_fixed_tzinfo_offset():
    assert get_time("%z", timezone(timedelta(hours=2))) == "+0200"


def test_utc_time_is_now():
    text = get_time("%Y-%m-%d %H:%M:%S", "UTC")
    parsed = datetime.strptime(text, "%Y-%m-%d %H:%M:%S").replace(tzinfo=timezone.utc)
    assert abs(datetime.now(timezone.utc) - parsed) < timedelta(seconds=5)


@pytest.mark.parametrize(
    "composite, expanded",
    [("%R", "%H:%M"), ("%T", "%H:%M:%S"), ("%F", "%Y-%m-%d")],
)
def test_composite_specifiers_expand(composite, expanded):
    left, right = get_time(f"{composite}|{expanded}", "UTC").split("|")
    assert left == right
    assert len(left) == {"%R": 5, "%T": 8, "%F": 10}[composite]


def test_escaped_composite_is_not_expanded():
    assert get_time("%%R", "UTC") == "%R"


def test_default_format_shape():
    left, right = get_time(f"{DEFAULT_FORMAT}|%a %d/%m %H:%M", "UTC").split("|")
    assert left == right


def test_local_time_matches_year():
    assert get_time("%Y") in {str(datetime.now().year), str(datetime.now().year - 1)}


def test_invalid_timezone_raises():
    with pytest.raises(ValueError, match="invalid timezone"):
        get_time("%H", "Not/A_Real_Zone")