"""
Packaged resource loading.

Resources are resolved through importlib.resources relative to an anchor:
a dotted package/module name, a module object, or any class or function
(its defining module is used). Relative paths resolve inside the anchor's
package; a path starting with '/' names a top-level package as its first
segment, e.g. '/mypkg/templates/report.txt'.
"""

import importlib
import sys
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from types import ModuleType
from typing import Any, Optional, Union

from filestools.config import get_settings
from filestools.exceptions import ResourceNotFoundError
from filestools.logging_config import get_logger


logger = get_logger(__name__)

Anchor = Union[str, ModuleType, Any]


def _anchor_module(anchor: Anchor) -> ModuleType:
    if isinstance(anchor, ModuleType):
        return anchor
    if isinstance(anchor, str):
        return importlib.import_module(anchor)
    module_name = getattr(anchor, "__module__", None)
    if module_name is None:
        raise TypeError(
            f"Cannot resolve resources relative to {type(anchor).__name__} object"
        )
    return sys.modules.get(module_name) or importlib.import_module(module_name)


def _anchor_root(module: ModuleType) -> Traversable:
    """Directory that relative resource paths resolve against."""
    if hasattr(module, "__path__"):
        return resources.files(module.__name__)
    if module.__package__:
        return resources.files(module.__package__)
    # Top-level plain module: resources sit next to its file
    module_file = getattr(module, "__file__", None)
    if module_file is None:
        raise ResourceNotFoundError(
            f"Module {module.__name__!r} has no location to resolve resources from"
        )
    return Path(module_file).parent


def _resolve(anchor: Anchor, resource_path: str) -> Traversable:
    parts = [part for part in resource_path.split("/") if part]
    if ".." in parts:
        raise ResourceNotFoundError(
            f"Resource not found: {resource_path} (parent segments not allowed)"
        )

    if resource_path.startswith("/"):
        if not parts:
            raise ResourceNotFoundError(f"Resource not found: {resource_path}")
        package, parts = parts[0], parts[1:]
        try:
            root = resources.files(package)
        except (ModuleNotFoundError, TypeError) as e:
            raise ResourceNotFoundError(
                f"Resource not found: {resource_path} (no package {package!r})"
            ) from e
    else:
        root = _anchor_root(_anchor_module(anchor))

    target = root.joinpath(*parts) if parts else root
    if not target.is_file():
        raise ResourceNotFoundError(
            f"Resource not found: {resource_path} (relative to {root})"
        )
    return target


def load_resource_as_bytes(anchor: Anchor, resource_path: str) -> bytes:
    """
    Read a packaged resource as raw bytes.

    Args:
        anchor: Package name, module, or object whose module anchors the lookup
        resource_path: Slash-separated path, relative or '/'-absolute

    Returns:
        Full resource content

    Raises:
        ResourceNotFoundError: If no file resource exists at the path
        OSError: If the resource cannot be read
    """
    target = _resolve(anchor, resource_path)
    data = target.read_bytes()
    logger.debug("resource_loaded", resource=resource_path, size=len(data))
    return data


def load_resource_as_string(
    anchor: Anchor,
    resource_path: str,
    encoding: Optional[str] = None,
) -> str:
    """
    Read a packaged resource and decode it as text.

    Nothing is cached; every call reads the resource again.

    Args:
        anchor: Package name, module, or object whose module anchors the lookup
        resource_path: Slash-separated path, relative or '/'-absolute
        encoding: Text encoding (default: settings.text_encoding, utf-8)

    Returns:
        Decoded resource content

    Raises:
        ResourceNotFoundError: If no file resource exists at the path
        OSError: If the resource cannot be read
        UnicodeDecodeError: If the bytes are not valid in the encoding

    Example:
        >>> load_resource_as_string(ReportBuilder, "templates/summary.txt")
        'Summary for {name}\\n'
    """
    encoding = encoding or get_settings().text_encoding
    return load_resource_as_bytes(anchor, resource_path).decode(encoding)
