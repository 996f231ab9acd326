from .base import RateSource, RateSourceFactory
from .cnb import CzechNationalBankRateSource, CzechNationalBankRateSourceFactory

__all__ = [
    'RateSource',
    'RateSourceFactory',
    'CzechNationalBankRateSource',
    'CzechNationalBankRateSourceFactory',
]
