class ScrapeException(Exception):
    """Base class for failures that abort a whole scrape cycle."""


class StatisticsTransportException(ScrapeException):
    """The statistics endpoint could not be reached, timed out or answered with a non-200 status."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class EnvelopeDecodeException(ScrapeException):
    """The response body is not a JSON array of statistic objects."""


class StatisticParseException(ScrapeException):
    """A statistic value could not be parsed as a number."""

    def __init__(self, statistic_name: str, raw_value: object, reason: str | None = None):
        message = f"Failed to parse value {raw_value!r} of statistic '{statistic_name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.statistic_name = statistic_name
        self.raw_value = raw_value


class MetricNameException(ScrapeException):
    """A formatted metric name was rejected by the metrics client."""
