class ChartError(Exception):
    """Base exception for chart generation failures."""


class UsageError(ChartError):
    """Raised when a chart request is invalid before any output is produced."""


class RecordNotFoundError(ChartError):
    """Raised when a requested xref does not resolve to a record."""


class ChartExecutionError(ChartError):
    """Raised when loading or rendering fails unexpectedly."""
