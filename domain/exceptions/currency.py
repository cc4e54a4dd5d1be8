class ConverterError(Exception):
    pass


class ValidationError(ConverterError):
    pass


class ConfigurationError(ConverterError):
    pass


class UpstreamError(ConverterError):
    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
