from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Union

log = logging.getLogger(__name__)

StrPath = Union[str, Path]


def clone_repo(repo_url: str, target_dir: StrPath) -> None:
    """Run ``git clone``; raises CalledProcessError when git fails."""
    log.info("Cloning %s into %s", repo_url, target_dir)
    subprocess.run(["git", "clone", repo_url, str(target_dir)], check=True)


def run_sessionizer(repo_path: StrPath, script: StrPath) -> None:
    """Open a terminal session for ``repo_path`` through the sessionizer script."""
    script_path = Path(script).expanduser()
    log.info("Running %s %s", script_path, repo_path)
    subprocess.run(["/bin/bash", str(script_path), str(repo_path)], check=True)
