from __future__ import annotations

import logging
import subprocess
import sys
from typing import Optional

from pydantic import ValidationError

from .config import Settings, get_settings
from .github import make_client
from .launcher import clone_repo, run_sessionizer
from .projects import find_local_repo
from .prompts import confirm_clone, select_repo, select_target_dir
from .recency import check_today

log = logging.getLogger(__name__)

NICE_PROMPT = "Nice you did commit today"


def run(settings: Settings) -> int:
    token = settings.github_token
    if not token:
        log.error("GitHub token not found, set GITHUB_TOKEN in the environment or .env")
        return 1

    with make_client(settings.github_api_url, settings.http_timeout) as client:
        result = check_today(client, token)

    if result.committed:
        print(NICE_PROMPT)
        return 0

    repos = result.repositories
    if not repos:
        print("No public repositories to choose from")
        return 1 if result.error else 0

    selected = select_repo(repos)
    project_paths = settings.project_paths

    local = find_local_repo(selected.name, project_paths)
    if local is not None:
        run_sessionizer(local, settings.sessionizer_script)
        return 0

    if not confirm_clone(selected.name):
        return 0

    repo_path = select_target_dir(project_paths) / selected.name
    try:
        clone_repo(selected.ssh_url, repo_path)
    except (subprocess.CalledProcessError, OSError) as e:
        print(f"Error cloning repo: {e}", file=sys.stderr)
        return 1

    run_sessionizer(repo_path, settings.sessionizer_script)
    return 0


def main(settings: Optional[Settings] = None) -> int:
    if settings is None:
        try:
            settings = get_settings()
        except ValidationError as e:
            print(f"Invalid configuration: {e}", file=sys.stderr)
            return 1
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        return run(settings)
    except (KeyboardInterrupt, EOFError):
        print("\nOperation cancelled by user")
        return 1
    except subprocess.CalledProcessError as e:
        log.error("Error running script: %s exited with status %s", " ".join(map(str, e.cmd)), e.returncode)
        return 1
    except OSError as e:
        log.error("%s", e)
        return 1
