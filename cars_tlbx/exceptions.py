"""Exceptions raised by the cars toolbox."""


class ConfigurationError(ValueError):
    """Raised when an analysis is configured with an unknown or unsuitable field.

    Field names are resolved once, when an analyzer or config is built, so this error
    surfaces at setup time and never while iterating over records.
    """


__all__ = ["ConfigurationError"]
