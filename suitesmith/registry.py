# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Registry of output files produced during one generation run.

Two generators targeting the same file in one run indicate a build
misconfiguration, so registering a path twice is an error rather than an
overwrite.

Example:
    >>> registry = GeneratedFilesRegistry()
    >>> registry.register(Path("/out/org/example/FooTestGenerated.java"))
    PosixPath('/out/org/example/FooTestGenerated.java')
    >>> registry.register(Path("/out/org/example/FooTestGenerated.java"))
    Traceback (most recent call last):
    ...
    DuplicateOutputPathError: Same test file already generated in current session: ...
"""

import logging
import threading
from pathlib import Path
from typing import Iterator, Optional

from suitesmith.errors import DuplicateOutputPathError

logger = logging.getLogger(__name__)


class GeneratedFilesRegistry:
    """Set of absolute output paths with atomic check-and-insert."""

    def __init__(self):
        self._paths: set[Path] = set()
        self._lock = threading.Lock()

    def register(self, path: Path) -> Path:
        """Record ``path`` as produced in this run.

        Returns:
            The absolute path that was registered

        Raises:
            DuplicateOutputPathError: If the path was already registered
        """
        path = Path(path).absolute()
        with self._lock:
            if path in self._paths:
                raise DuplicateOutputPathError(path)
            self._paths.add(path)
        logger.debug(f"Registered output path {path}")
        return path

    def reset(self) -> None:
        """Forget all registered paths (start of a new run)."""
        with self._lock:
            self._paths.clear()

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        with self._lock:
            return Path(path).absolute() in self._paths

    def __len__(self) -> int:
        with self._lock:
            return len(self._paths)

    def __iter__(self) -> Iterator[Path]:
        with self._lock:
            return iter(sorted(self._paths))


_default_registry: Optional[GeneratedFilesRegistry] = None
_default_registry_lock = threading.Lock()


def get_generated_files_registry() -> GeneratedFilesRegistry:
    """Get the process-wide registry used when no explicit one is passed."""
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = GeneratedFilesRegistry()
        return _default_registry


def reset_generated_files_registry() -> None:
    """Reset the process-wide registry (mainly for testing)."""
    get_generated_files_registry().reset()
