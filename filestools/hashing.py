"""
Hashing Utilities Module.

Provides checksum helpers for files and in-memory content, MD5 by default.

Note: MD5 is used here as a content checksum, not for security.
"""

import hashlib
import os
from typing import Iterable, Optional, Union

from filestools.config import get_settings
from filestools.exceptions import UnsupportedAlgorithmError
from filestools.logging_config import get_logger


logger = get_logger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def _new_digest(algorithm: str):
    """Create a hashlib object, translating availability errors."""
    try:
        return hashlib.new(algorithm, usedforsecurity=False)
    except ValueError as e:
        raise UnsupportedAlgorithmError(
            f"Hash algorithm not available: {algorithm}"
        ) from e


def bytes_to_hex(data: Union[BytesLike, Iterable[int]]) -> str:
    """
    Convert bytes to a lowercase hexadecimal string.

    Every value is masked to its unsigned 8-bit form, so signed bytes
    such as -1 render as 'ff'.

    Args:
        data: Bytes-like object or iterable of ints

    Returns:
        Two hex characters per byte, empty string for empty input

    Example:
        >>> bytes_to_hex(b"\\x00\\x0f\\xff")
        '000fff'
        >>> bytes_to_hex([-1, 16])
        'ff10'
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).hex()
    return "".join(f"{b & 0xFF:02x}" for b in data)


def hash_bytes(data: BytesLike, algorithm: str = "md5") -> str:
    """
    Calculate the hex digest of in-memory bytes.

    Args:
        data: Content to hash
        algorithm: Any hashlib algorithm name (default: md5)

    Returns:
        Lowercase hexadecimal digest

    Raises:
        UnsupportedAlgorithmError: If the algorithm is unavailable
    """
    digest = _new_digest(algorithm)
    digest.update(data)
    return bytes_to_hex(digest.digest())


def hash_file(
    file_path: Union[str, os.PathLike],
    algorithm: str = "md5",
    chunk_size: Optional[int] = None,
) -> str:
    """
    Calculate the hex digest of a file's content.

    Reads the file in chunks so large files are never loaded into
    memory at once. The chunk size does not affect the result.

    Args:
        file_path: Path to the file to hash
        algorithm: Any hashlib algorithm name (default: md5)
        chunk_size: Bytes per read (default: settings.hash_chunk_size)

    Returns:
        Lowercase hexadecimal digest

    Raises:
        FileNotFoundError: If file does not exist
        PermissionError: If file cannot be read
        IsADirectoryError: If path is a directory
        UnsupportedAlgorithmError: If the algorithm is unavailable
        ValueError: If chunk_size is not positive
    """
    if chunk_size is None:
        chunk_size = get_settings().hash_chunk_size
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    digest = _new_digest(algorithm)

    with open(file_path, 'rb') as f:
        for chunk in iter(lambda: f.read(chunk_size), b''):
            digest.update(chunk)

    return bytes_to_hex(digest.digest())


def hash_string(
    source: str,
    algorithm: str = "md5",
    encoding: Optional[str] = None,
) -> str:
    """
    Calculate the hex digest of a string.

    Args:
        source: String to hash
        algorithm: Any hashlib algorithm name (default: md5)
        encoding: Byte encoding (default: settings.text_encoding, utf-8)

    Returns:
        Lowercase hexadecimal digest
    """
    encoding = encoding or get_settings().text_encoding
    return hash_bytes(source.encode(encoding), algorithm)


def md5_of_file(
    file_path: Union[str, os.PathLike],
    chunk_size: Optional[int] = None,
) -> str:
    """
    Calculate the MD5 checksum of a file.

    Args:
        file_path: Path to the file to hash
        chunk_size: Bytes per read (default: settings.hash_chunk_size)

    Returns:
        Hexadecimal MD5 hash string (32 characters)

    Raises:
        FileNotFoundError: If file does not exist
        OSError: If file cannot be opened or read

    Example:
        >>> md5_of_file("/path/to/empty.txt")
        'd41d8cd98f00b204e9800998ecf8427e'
    """
    path = os.fspath(file_path)
    logger.debug("md5_calculating", path=path)

    md5sum = hash_file(path, algorithm="md5", chunk_size=chunk_size)

    logger.debug("md5_calculated", path=path, md5=md5sum)
    return md5sum


def md5_of_string(source: str, encoding: Optional[str] = None) -> str:
    """
    Calculate the MD5 checksum of a string's UTF-8 bytes.

    Example:
        >>> md5_of_string("")
        'd41d8cd98f00b204e9800998ecf8427e'
    """
    return hash_string(source, algorithm="md5", encoding=encoding)
