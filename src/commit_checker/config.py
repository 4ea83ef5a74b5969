from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, List, Optional, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Repositories that never count towards today's commit and are never offered.
EXCLUDED_REPOS: FrozenSet[str] = frozenset({"kickstart.nvim"})

# A repository untouched for longer than this cannot hold a commit from today.
STALE_AFTER_DAYS = 10

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def env_files(home: Optional[Path] = None) -> Tuple[Path, ...]:
    """``.env`` locations, lowest priority first: the user config dir, then the cwd."""
    home = home or Path.home()
    return (home / ".config" / "commit-checker" / ".env", Path(".env"))


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=env_files(), env_file_encoding="utf-8", extra="ignore")

    github_token: Optional[str] = Field(default=None, alias="GITHUB_TOKEN")
    github_api_url: str = Field(default="https://api.github.com", alias="GITHUB_API_URL")
    http_timeout: float = Field(default=30.0, alias="HTTP_TIMEOUT")
    projects_root: Path = Field(default=Path.home() / "projects", alias="PROJECTS_ROOT")
    project_subdirs: str = Field(default="golang,rust", alias="PROJECT_SUBDIRS")
    sessionizer_script: Path = Field(
        default=Path.home() / ".local" / "bin" / "tmux-sessionizer", alias="SESSIONIZER_SCRIPT"
    )
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level

    @property
    def subdir_list(self) -> List[str]:
        parts = [p.strip() for p in self.project_subdirs.split(",") if p.strip()]
        return list(dict.fromkeys(parts))

    @property
    def project_paths(self) -> List[Path]:
        root = self.projects_root.expanduser()
        return [root] + [root / sub for sub in self.subdir_list]


@lru_cache()
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
