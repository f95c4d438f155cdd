# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Writing generated files without touching unchanged ones.

Generated sources are rewritten on every build; skipping identical content
keeps timestamps stable so downstream compilation stays incremental.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def content_changed(path: str | Path, content: str, encoding: str = "utf-8") -> bool:
    """True unless ``path`` is a file whose bytes equal the encoded ``content``.

    Raises:
        OSError: If an existing file cannot be read
    """
    path = Path(path)
    return not path.is_file() or path.read_bytes() != content.encode(encoding)


def write_file_if_content_changed(
    path: str | Path,
    content: str,
    log_not_changed: bool = False,
    encoding: str = "utf-8",
) -> bool:
    """Write ``content`` to ``path`` unless the file already holds it.

    Args:
        path: Output file path
        content: Full text of the file
        log_not_changed: Report skipped writes at INFO instead of DEBUG
        encoding: Text encoding (default: utf-8)

    Returns:
        True if the file was written, False if it was left untouched

    Raises:
        OSError: If the file cannot be read or written
    """
    path = Path(path)

    if not content_changed(path, content, encoding):
        if log_not_changed:
            logger.info(f"Not changed: {path}")
        else:
            logger.debug(f"Not changed: {path}")
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    # No newline translation
    path.write_bytes(content.encode(encoding))
    logger.info(f"File written: {path}")
    return True
