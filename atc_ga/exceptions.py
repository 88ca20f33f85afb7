# atc_ga/exceptions.py


class ATCError(Exception):
    """Base class for every error raised by the package."""


class ConfigurationError(ATCError, ValueError):
    """Invalid population or algorithm parameters."""


class InstanceError(ATCError, ValueError):
    """Malformed problem instance."""


class AlgorithmException(ATCError):
    """Raised when a genetic algorithm run fails.

    The original exception is chained and also kept in ``cause``.
    """

    def __init__(self, message: str, cause: BaseException = None):
        super().__init__(message)
        self.cause = cause
