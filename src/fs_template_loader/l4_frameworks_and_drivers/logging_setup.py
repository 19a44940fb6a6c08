"""File-based debug logging setup."""

from __future__ import annotations

import logging
import os
from pathlib import Path


def setup_file_logging(output_dir: Path) -> Path:
    """Configure file-based debug logging into the output directory.

    Calling it again for the same directory does not add a second handler.
    """
    log_path = output_dir / 'fstl_debug.log'
    root = logging.getLogger('fstl')
    root.setLevel(logging.DEBUG)
    for existing in root.handlers:
        if isinstance(existing, logging.FileHandler) and existing.baseFilename == os.path.abspath(log_path):
            return log_path
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
    root.addHandler(handler)
    root.info('Debug logging started: %s', log_path)
    return log_path
