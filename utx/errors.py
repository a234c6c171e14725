"""
Error types raised while loading UTX packages.

Every failure inside the structural parse is reported to callers as a
single PackageError subclass; the stream-level errors below are raised by
the reader and name decoder and get converted by the orchestrator.
"""


class PackageError(Exception):
    """Base class for all package loading errors."""


class CouldNotOpenError(PackageError):
    """The package file could not be opened."""


class InvalidHeaderError(PackageError, ValueError):
    """Bad signature, unsupported version, or a broken table."""


class IllegalOperationError(PackageError):
    """A load was requested without a target to load into."""


class AllocationError(PackageError, MemoryError):
    """A table could not be allocated."""


class FinalizeError(PackageError):
    """The target rejected the loaded asset."""


class UnexpectedEOF(PackageError, EOFError):
    """The stream ended in the middle of a field."""


class NameTooLongError(PackageError):
    """An old-style name ran past the scratch buffer without a terminator."""
