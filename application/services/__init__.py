from .conversion_service import ConversionService
from .rate_service import RateResolver

__all__ = ['ConversionService', 'RateResolver']
