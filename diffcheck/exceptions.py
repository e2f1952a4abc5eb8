class DiffCheckError(Exception):
    """Base class for all diffcheck errors."""


class InvalidArgumentError(DiffCheckError, ValueError):
    """Raised when a comparison option structure is malformed."""


class InputError(DiffCheckError):
    """Raised when an input source cannot be read or parsed."""
