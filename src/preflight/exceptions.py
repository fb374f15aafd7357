class PreflightException(Exception):
    """Base Exception Class"""
    pass

class ConfigurationError(PreflightException):
    """Configuration Error"""

    def __init__(self, message: str, missing_keys=None):
        self.missing_keys = list(missing_keys or [])
        super().__init__(message)

    @classmethod
    def for_missing(cls, missing_keys) -> "ConfigurationError":
        keys = list(missing_keys)
        return cls(f"Missing {' and '.join(keys)} in .env file", keys)

class RemoteReportedError(PreflightException):
    """The backend answered, but with an error object"""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code
        super().__init__(message)

class UnexpectedError(PreflightException):
    """Anything else raised while talking to the backend"""

    def __init__(self, original: Exception):
        self.original = original
        super().__init__(str(original) or repr(original))
