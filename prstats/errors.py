"""Errors raised by prstats. All of them surface to the CLI unhandled."""


class PrStatsError(Exception):
    """Base class for every error prstats reports to the user."""

    pass


class ConfigError(PrStatsError):
    """Raised when required configuration (e.g. the access token) is missing."""

    pass


class InvalidPeriodFormat(PrStatsError):
    """Raised when a relative period such as "1w" cannot be parsed."""

    def __init__(self, period: str) -> None:
        super().__init__(f'Invalid period format: {period!r}. Use e.g. "2d", "1w", "3mo", or "1y".')
        self.period = period


class InvalidDateFormat(PrStatsError):
    """Raised when a date string is not a valid YYYY-MM-DD date."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid date format: {value!r}. Use YYYY-MM-DD.")
        self.value = value


class RemoteRequestFailed(PrStatsError):
    """Raised when a hosting API call fails (HTTP error or transport error)."""

    def __init__(self, status_code: int | None, message: str) -> None:
        prefix = f"{status_code}: " if status_code is not None else ""
        super().__init__(f"{prefix}{message}")
        self.status_code = status_code
        self.message = message


class QueryabilityCheckFailed(PrStatsError):
    """Raised when probing an author fails for a reason other than privacy."""

    def __init__(self, username: str, cause: Exception) -> None:
        super().__init__(f'Error checking queryability of user "{username}": {cause}')
        self.username = username
        self.cause = cause


class UnsupportedExportFormat(PrStatsError):
    """Raised for export formats other than json and csv."""

    def __init__(self, fmt: str) -> None:
        super().__init__(f'Unsupported export format: {fmt!r}. Use "json" or "csv".')
        self.fmt = fmt
