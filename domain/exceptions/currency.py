class CurrencyException(Exception):
    pass


class InvalidCurrencyError(CurrencyException):
    pass


class ProviderError(CurrencyException):
    pass
