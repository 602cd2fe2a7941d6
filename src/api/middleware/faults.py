from starlette.requests import ClientDisconnect

from src.core.errors import Panic


def normalize_fault(fault: object) -> BaseException:
    """
    Turn whatever escaped the handler into a single error value.

    Single-member exception groups (anyio task groups wrap errors this way)
    are unwrapped. The middleware only ever passes exceptions; values that
    are not exceptions are wrapped in `Panic` for direct callers.
    """
    if isinstance(fault, BaseExceptionGroup) and len(fault.exceptions) == 1:
        return normalize_fault(fault.exceptions[0])
    if isinstance(fault, BaseException):
        return fault
    return Panic(fault)


def describe_fault(error: BaseException) -> str:
    """Message of the error, or its repr when it carries none."""
    message = str(error)
    return message if message else repr(error)


def is_abort_sentinel(error: BaseException) -> bool:
    """
    True when the client already went away.

    Writing a response is pointless then; the error has to reach the
    server so it can clean up the connection.
    """
    return isinstance(error, ClientDisconnect)
