"""Exceptions that end a tally session."""


class TallyError(Exception):
    """Base class for fatal tally errors."""


class InputClosedError(TallyError):
    """Raised when the input stream ends while waiting for a line."""


class ConfigError(TallyError):
    """Raised when the configuration file cannot be used."""
