"""Exception hierarchy for the Social Media Share Dashboard."""


class DashboardError(ValueError):
    """Base class for dashboard data errors."""


class EmptyDatasetError(DashboardError):
    """Raised when an aggregation is asked to average zero rows."""

    def __init__(self, message: str = "cannot average an empty dataset"):
        super().__init__(message)


class UnknownPlatformError(DashboardError):
    """Raised when a platform is blank or absent from every row."""

    def __init__(self, platform: str):
        if platform:
            message = f"unknown platform: {platform!r}"
        else:
            message = "no platform selected"
        super().__init__(message)
        self.platform = platform


class DataSourceError(DashboardError):
    """Raised when the CSV resource cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read CSV data from '{path}': {reason}")
        self.path = path
        self.reason = reason
