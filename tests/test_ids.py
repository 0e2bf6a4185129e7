import pytest

from whitelist_bot.commands.ids import parse_user_id, parse_user_ids
from whitelist_bot.whitelist.errors import ValidationError


def test_parse_user_id_accepts_digits():
    assert parse_user_id(" 123456 ") == 123456


@pytest.mark.parametrize("raw", ["", "-5", "12a", "1.5", "abc"])
def test_parse_user_id_rejects_non_numeric(raw):
    with pytest.raises(ValidationError):
        parse_user_id(raw)


def test_parse_user_ids_keeps_order_and_drops_junk():
    assert parse_user_ids("4, 2,x,,4 , -1,9") == [4, 2, 4, 9]


def test_parse_user_ids_rejects_empty_result():
    with pytest.raises(ValidationError, match="No valid User IDs"):
        parse_user_ids("a, b,")


@pytest.mark.parametrize("raw", ["١٢٣", "12３"])
def test_parse_user_id_rejects_non_ascii_digits(raw):
    with pytest.raises(ValidationError):
        parse_user_id(raw)


def test_parse_user_ids_drops_non_ascii_digits():
    assert parse_user_ids("٣, 8") == [8]
