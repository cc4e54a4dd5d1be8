from .conversion import convert_amount, derive_btc_per_unit, format_rate

__all__ = ['convert_amount', 'derive_btc_per_unit', 'format_rate']
