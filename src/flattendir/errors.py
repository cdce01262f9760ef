# src/flattendir/errors.py


class FlattenError(Exception):
    """Base class for fatal flattendir errors."""


class UsageError(FlattenError):
    """Raised when the command line cannot be turned into a run."""


class RootUnreadableError(FlattenError):
    """Raised when the root directory (or a directory under it) cannot be listed."""


class OutputWriteError(FlattenError):
    """Raised when the flattened result cannot be written to its destination."""
