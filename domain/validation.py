import re
from decimal import Decimal

from domain.exceptions.currency import ValidationError
from domain.models.currency import ConversionRequest, Currency

# Digits with an optional fractional part; no sign, no exponent.
_AMOUNT_PATTERN = re.compile(r'^[0-9]+(\.[0-9]+)?$')


def validate_input(currency_raw: str | None, amount_raw: str | None) -> ConversionRequest:
    if not isinstance(currency_raw, str):
        raise ValidationError("Query param 'currency' is required.")

    try:
        currency = Currency(currency_raw.upper())
    except ValueError as e:
        raise ValidationError("Query param 'currency' must be one of: USD, GBP, JPY.") from e

    if not isinstance(amount_raw, str):
        raise ValidationError("Query param 'amount' is required.")

    amount = amount_raw.strip()
    if not amount:
        raise ValidationError("Query param 'amount' must be a positive numeric string.")

    if not _AMOUNT_PATTERN.match(amount):
        raise ValidationError(
            "Query param 'amount' must be a positive numeric string (e.g. 10 or 10.5)."
        )

    if Decimal(amount) <= 0:
        raise ValidationError("Query param 'amount' must be greater than 0.")

    return ConversionRequest(currency=currency, amount=amount)
