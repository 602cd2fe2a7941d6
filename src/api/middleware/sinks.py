import logging
from typing import Callable

from src.api.middleware.faults import describe_fault

logger = logging.getLogger(__name__)

LogFunc = Callable[[BaseException, str], None]


def log_panic(error: BaseException, stack: str) -> None:
    """Default sink: one `[PANIC]` line per recovered fault."""
    logger.error("[PANIC]: %s %s", describe_fault(error), stack)
