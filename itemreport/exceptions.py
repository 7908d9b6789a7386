"""Exception types for ItemReport.

The rendering pipeline itself never raises: abnormal inputs degrade to empty
or garbage output. These cover configuration and command-line input only.
"""


class ItemReportError(Exception):
    """Base class for ItemReport errors."""
    pass


class ConfigError(ItemReportError):
    """Raised when an environment setting is malformed."""
    pass


class ItemsFileError(ItemReportError):
    """Raised when an items file cannot be read or does not hold a list of objects."""
    pass
