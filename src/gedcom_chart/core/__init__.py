from gedcom_chart.core.exceptions import (
    ChartError,
    ChartExecutionError,
    RecordNotFoundError,
    UsageError,
)

__all__ = [
    "ChartError",
    "ChartExecutionError",
    "RecordNotFoundError",
    "UsageError",
]
