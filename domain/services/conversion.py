from decimal import ROUND_DOWN, ROUND_HALF_UP, Context, Decimal

from domain.models.currency import Currency, RateSnapshot

BTC_DECIMAL_PLACES = 8
RATE_SIGNIFICANT_DIGITS = 12

# Cross-rate division is the only inexact step before presentation.
RATE_CONTEXT = Context(prec=34, rounding=ROUND_HALF_UP)

_BTC_QUANTUM = Decimal(1).scaleb(-BTC_DECIMAL_PLACES)


def derive_btc_per_unit(currency: Currency, snapshot: RateSnapshot) -> Decimal:
    """BTC bought by one unit of `currency`, crossed through the USD base."""
    btc_per_usd = snapshot.rates['BTC']
    if currency == Currency.USD:
        return btc_per_usd
    return RATE_CONTEXT.divide(btc_per_usd, snapshot.rates[currency.value])


def _exact_context(*operands: Decimal) -> Context:
    digits = sum(len(op.as_tuple().digits) for op in operands)
    return Context(prec=max(digits, RATE_CONTEXT.prec) + BTC_DECIMAL_PLACES, rounding=ROUND_DOWN)


def convert_amount(amount: str, btc_per_unit: Decimal) -> str:
    """Multiply exactly, then truncate to 8 places so the BTC amount is never overstated."""
    value = Decimal(amount)
    ctx = _exact_context(value, btc_per_unit)
    product = ctx.multiply(value, btc_per_unit)
    truncated = product.quantize(_BTC_QUANTUM, rounding=ROUND_DOWN, context=ctx)
    return f'{truncated:f}'


def format_rate(btc_per_unit: Decimal) -> str:
    ctx = Context(prec=RATE_SIGNIFICANT_DIGITS, rounding=ROUND_HALF_UP)
    rounded = ctx.plus(btc_per_unit).normalize(ctx)
    return f'{rounded:f}'
