"""
Exceptions raised by filestools.

Filesystem failures are not wrapped: FileNotFoundError, NotADirectoryError,
PermissionError and friends reach the caller as raised by the OS layer.
"""


class FilesToolsError(Exception):
    """Base exception for filestools errors."""
    pass


class ResourceNotFoundError(FilesToolsError, FileNotFoundError):
    """A packaged resource path does not resolve to a readable file."""
    pass


class UnsupportedAlgorithmError(FilesToolsError, ValueError):
    """The requested hash algorithm is not available in this runtime."""
    pass
