from decimal import Decimal

import pytest

from utils.formatting import amount_to_words, format_indian_currency, to_money


@pytest.mark.parametrize("amount, words", [
    (0, "Zero Rupees Only"),
    (1, "One Rupee Only"),
    (100, "One Hundred Rupees Only"),
    (100000, "One Lakh Rupees Only"),
    (10000000, "One Crore Rupees Only"),
    (11800, "Eleven Thousand Eight Hundred Rupees Only"),
    (Decimal("1250.50"), "One Thousand Two Hundred Fifty Rupees and Fifty Paise Only"),
    (Decimal("0.75"), "Seventy Five Paise Only"),
    (Decimal("-42"), "Minus Forty Two Rupees Only"),
])
def test_amount_to_words(amount, words):
    assert amount_to_words(amount) == words


def test_amount_to_words_rounds_to_the_paisa():
    assert amount_to_words(Decimal("10.005")) == "Ten Rupees and One Paise Only"


def test_amount_to_words_none():
    assert amount_to_words(None) == ""


def test_to_money_rounds_half_up():
    assert to_money(Decimal("2.345")) == Decimal("2.35")
    assert to_money(Decimal("2.344")) == Decimal("2.34")
    assert to_money(None) == Decimal("0.00")


@pytest.mark.parametrize("amount, formatted", [
    (Decimal("999"), "₹ 999.00"),
    (Decimal("1234567.8"), "₹ 12,34,567.80"),
    (Decimal("-150000"), "₹ -1,50,000.00"),
])
def test_format_indian_currency(amount, formatted):
    assert format_indian_currency(amount) == formatted
