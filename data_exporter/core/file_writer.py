# Path: data_exporter/core/file_writer.py
"""
File Writer

Persistence collaborator for the export pipeline.

Writes content to a path, creating parent directories as needed.
Content goes to a temporary sibling file first and is moved over
the target only once fully written, so a failed write never leaves
a partial or truncated file behind.
"""

import os
import tempfile
from pathlib import Path
from typing import Union

from ..constants import DEFAULT_ENCODING
from .errors import PersistenceError
from .logger import get_output_logger


logger = get_output_logger('file_writer')


def write_file(
    path: Union[str, Path],
    content: str,
    encoding: str = DEFAULT_ENCODING,
) -> Path:
    """
    Write content to a file, replacing any existing file.

    Args:
        path: Target file path
        content: Text to write
        encoding: Text encoding for the file

    Returns:
        Path to the written file

    Raises:
        PersistenceError: If the directory or file cannot be written,
            or the content cannot be encoded
    """
    target = Path(path)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PersistenceError(
            f"Failed to create directory {target.parent}: {e}", path=target,
        ) from e

    fd, tmp_name = tempfile.mkstemp(
        prefix=f'.{target.name}.', suffix='.tmp', dir=target.parent,
    )
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, 'w', encoding=encoding, newline='') as f:
            f.write(content)
        os.replace(tmp_path, target)
    except (OSError, LookupError, UnicodeError) as e:
        tmp_path.unlink(missing_ok=True)
        raise PersistenceError(
            f"Failed to save file {target}: {e}", path=target,
        ) from e

    logger.debug(f"Wrote {len(content)} characters to {target}")
    return target


__all__ = ['write_file']
