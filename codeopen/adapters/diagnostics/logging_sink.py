"""DiagnosticSink adapter backed by the logging module."""

import logging


class LoggingDiagnosticSink:
    """Forwards diagnostics to a logger (codeopen.diagnostics by default)."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logging.getLogger("codeopen.diagnostics")

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)
