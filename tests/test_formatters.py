from utils.formatters import format_currency, format_rate


def test_format_currency():
    assert format_currency(2050000) == "₩2,050,000"
    assert format_currency("450000") == "₩450,000"
    assert format_currency(None) == "₩0"
    assert format_currency("abc") == "abc"


def test_format_rate():
    assert format_rate(75) == "75.0%"
    assert format_rate(None) == "0.0%"
