class CurrencyException(Exception):
    pass


class InvalidCurrencyError(CurrencyException):
    pass


class UnknownCurrencyError(InvalidCurrencyError):
    def __init__(self, code: str):
        super().__init__(f"Unknown currency code: {code}")
        self.code = code


class ProviderError(CurrencyException):
    pass


class UpstreamUnavailableError(ProviderError):
    pass


class MalformedResponseError(ProviderError):
    pass
