# nosec B101


import pytest

from domain.exceptions.currency import ValidationError
from domain.models.currency import Currency
from domain.validation import validate_input


def test_valid_input_returns_request():
    request = validate_input('GBP', '100')

    assert request.currency == Currency.GBP
    assert request.amount == '100'


def test_currency_is_normalized_to_uppercase():
    assert validate_input('jpy', '1.5').currency == Currency.JPY


def test_amount_is_trimmed():
    assert validate_input('USD', '  10.5 ').amount == '10.5'


def test_missing_currency():
    with pytest.raises(ValidationError) as exc_info:
        validate_input(None, '10')

    assert "'currency' is required" in str(exc_info.value)


def test_unsupported_currency():
    with pytest.raises(ValidationError) as exc_info:
        validate_input('EUR', '10')

    assert 'must be one of: USD, GBP, JPY' in str(exc_info.value)


def test_missing_amount():
    with pytest.raises(ValidationError) as exc_info:
        validate_input('USD', None)

    assert "'amount' is required" in str(exc_info.value)


def test_blank_amount():
    with pytest.raises(ValidationError) as exc_info:
        validate_input('USD', '   ')

    assert str(exc_info.value) == "Query param 'amount' must be a positive numeric string."


@pytest.mark.parametrize('amount', ['-10', '+10', '1e5', '10.', '.5', 'abc', '1,000', 'NaN', 'Infinity'])
def test_malformed_amount(amount):
    with pytest.raises(ValidationError) as exc_info:
        validate_input('USD', amount)

    assert 'e.g. 10 or 10.5' in str(exc_info.value)


@pytest.mark.parametrize('amount', ['0', '0.0', '000.000'])
def test_zero_amount(amount):
    with pytest.raises(ValidationError) as exc_info:
        validate_input('USD', amount)

    assert 'greater than 0' in str(exc_info.value)


def test_leading_zeros_are_kept_verbatim():
    assert validate_input('USD', '007.50').amount == '007.50'
