from .rate_provider import RateProvider

__all__ = ['RateProvider']
