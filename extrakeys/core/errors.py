"""Errors raised while parsing the ``extra-keys`` property."""


class ExtraKeysError(Exception):
    """Base class for ``extra-keys`` configuration failures."""


class UnsupportedShapeError(ExtraKeysError, NotImplementedError):
    """Bare-string or JSON-object ``extra-keys`` value."""


class PerKeyConfigNotImplementedError(ExtraKeysError, NotImplementedError):
    """A row element carries per-key configuration (popup, styling)."""


class MixedTypeError(ExtraKeysError, ValueError):
    """The top-level list mixes rows and plain keys."""


class MalformedExtraKeysError(ExtraKeysError, ValueError):
    """The ``extra-keys`` value is not valid JSON."""
