"""Custom exceptions for the :mod:`traffic_stats` package."""


class TrafficStatsError(Exception):
    """Base class for all custom ``traffic_stats`` exceptions.

    Parameters
    ----------
    message:
        Short description of the failure.
    context:
        Optional additional information about where/why the error occurred.
    suggestion:
        Optional hint that may help recover from the error.
    """

    def __init__(
        self,
        message: str = "",
        *,
        context: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(message)
        self.context = context
        self.suggestion = suggestion


class InvalidOptionError(TrafficStatsError, ValueError):
    """Raised when a sort or representation option cannot be parsed."""
