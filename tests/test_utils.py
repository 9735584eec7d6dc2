import pytest

from exocomp.utils import format_duration


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0s"),
        (59, "59s"),
        (60, "1m 0s"),
        (754.9, "12m 34s"),
        (3600, "1h 0m 0s"),
        (90061, "25h 1m 1s"),
    ],
)
def test_format_duration(seconds, expected) -> None:
    assert format_duration(seconds) == expected
