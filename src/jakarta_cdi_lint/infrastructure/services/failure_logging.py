"""Failure logging for contained rule errors."""

import logging


class FailureLogger:
    """Logs unexpected rule failures with their traceback. Never raises."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("jakarta_cdi_lint.rules")

    def log_failure(self, context_message: str, error: BaseException) -> None:
        self._logger.error("%s: %s", context_message, error, exc_info=error)
