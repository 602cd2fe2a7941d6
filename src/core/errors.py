class AppError(Exception):
    """Base class for all application errors."""

    pass


class RecovererError(AppError):
    """Raised when the recovery middleware is configured with invalid values."""

    pass


class Panic(AppError):
    """
    Wraps a fault value that is not an exception itself.

    The original value is kept on `value`; the message is its text form so
    that logging sinks can treat every fault as an error with a message.
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"{value}")
