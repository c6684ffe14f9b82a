"""Path id parsing."""

import pytest

from storefront.utils.ids import parse_id


@pytest.mark.parametrize("raw, expected", [("1", 1), (" 12 ", 12), ("+5", 5), ("-3", -3), (7, 7)])
def test_parses_whole_numbers(raw, expected):
    assert parse_id(raw) == expected


@pytest.mark.parametrize("raw", ["1_0", "0_1", "\u0661", "\uff11", "1.5", "abc", "", None])
def test_rejects_everything_else(raw):
    assert parse_id(raw) is None
