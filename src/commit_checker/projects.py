from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Optional

log = logging.getLogger(__name__)


def find_local_repo(name: str, project_paths: Iterable[Path]) -> Optional[Path]:
    """Return ``<project dir>/<name>`` for the first project dir holding ``name``.

    Project directories that do not exist are skipped. Any other failure to
    list a directory raises OSError.
    """
    for path in project_paths:
        try:
            entries = os.listdir(path)
        except FileNotFoundError:
            log.debug("Project directory %s does not exist", path)
            continue
        if name in entries:
            return Path(path) / name
    return None
