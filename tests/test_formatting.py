import pytest

from app.domain.services.formatting import decimals_for, format_money, round_amount, round_rate


@pytest.mark.parametrize(
    "amount,currency,expected",
    [
        (199.99, "USD", "$199.99"),
        (154.5377, "GBP", "£154.54"),
        (10, "eur", "€10.00"),
        (29089.45, "JPY", "¥29089"),
        (12.5, "CHF", "Fr12.50"),
        (3.14159, "SEK", "SEK 3.14"),
    ],
)
def test_format_money(amount, currency, expected):
    assert format_money(amount, currency) == expected


def test_decimals_for_zero_decimal_currencies():
    assert decimals_for("JPY") == 0
    assert decimals_for("krw") == 0
    assert decimals_for("USD") == 2


def test_round_amount_and_rate():
    assert round_amount(77.272727, "GBP") == 77.27
    assert round_amount(29089.45, "JPY") == 29089.0
    assert round_rate(0.85 / 1.1) == 0.772727
