"""
Error and warning types raised by the lottery statistics package.
"""


class LotteryStatsError(Exception):
    """Base class for every error raised by lottostats."""


class ConfigurationError(LotteryStatsError, ValueError):
    """A caller supplied an invalid game schema, pool size or strategy."""


class DataFetchError(LotteryStatsError):
    """The open-data API could not be reached or answered with an error."""


class DataIntegrityWarning(UserWarning):
    """A draw carried a value outside its pool; the value was ignored."""
