"""
filestools - file and checksum helpers.

Modules:
- hashing: MD5 (and other hashlib) digests for files and strings, hex encoding
- file_utils: File extensions, shallow listing, depth-bounded directory walks
- resources: Loading packaged resources as text or bytes
- config: Settings from FILESTOOLS_* environment variables
- logging_config: structlog setup
"""

__version__ = "1.0.0"

from filestools.logging_config import configure_logging

from filestools.exceptions import (
    FilesToolsError,
    ResourceNotFoundError,
    UnsupportedAlgorithmError,
)

from filestools.hashing import (
    bytes_to_hex,
    hash_bytes,
    hash_file,
    hash_string,
    md5_of_file,
    md5_of_string,
)

from filestools.file_utils import (
    get_file_extension,
    list_files_shallow,
    list_files_deep,
)

from filestools.resources import (
    load_resource_as_bytes,
    load_resource_as_string,
)

__all__ = [
    '__version__',

    # Hashing utilities
    'bytes_to_hex',
    'hash_bytes',
    'hash_file',
    'hash_string',
    'md5_of_file',
    'md5_of_string',

    # File utilities
    'get_file_extension',
    'list_files_shallow',
    'list_files_deep',

    # Resources
    'load_resource_as_bytes',
    'load_resource_as_string',

    # Errors
    'FilesToolsError',
    'ResourceNotFoundError',
    'UnsupportedAlgorithmError',

    # Logging
    'configure_logging',
]
