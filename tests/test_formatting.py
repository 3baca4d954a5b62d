from datetime import date

from finatrak.utils.formatting import format_currency, format_number, format_date, format_decimal


def test_format_number_uses_french_separators():
    assert format_number(1234567.891) == '1\u00a0234\u00a0567,89'
    assert format_number(-5) == '-5,00'
    assert format_number('abc') == '0,00'


def test_format_currency():
    assert format_currency(1234.5, fmt='{} €') == '1\u00a0234,50 €'
    assert format_currency(None, fmt='{} €') == '0,00 €'


def test_format_currency_uses_app_config(app):
    app.config['FORMAT_DEVISE'] = 'EUR {}'
    assert format_currency(3) == 'EUR 3,00'


def test_format_date_and_decimal():
    assert format_date(date(2025, 2, 1)) == '01/02/2025'
    assert format_date(None) == ''
    assert format_decimal('12,3') == '12.30'
