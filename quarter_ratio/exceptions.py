"""Errors raised by the quarter distribution"""


class DistributedRatioError(Exception):
    """Base class for every quarter_ratio error"""


class ConfigMismatchError(DistributedRatioError):
    """The default ratios do not line up with the number of quarters"""


class InvalidConfigError(DistributedRatioError):
    """A configuration value is out of range or unknown"""


class QuarterDataError(DistributedRatioError):
    """Quarter data could not be read"""
