from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Repository(BaseModel):
    """One entry of ``GET /user/repos``; unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    full_name: str
    private: bool
    updated_at: dt.datetime
    ssh_url: str
    language: Optional[str] = None


class CommitActor(BaseModel):
    model_config = ConfigDict(extra="ignore")

    date: dt.datetime


class CommitData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    committer: CommitActor


class Commit(BaseModel):
    """One entry of ``GET /repos/{owner}/{repo}/commits``."""

    model_config = ConfigDict(extra="ignore")

    sha: str
    commit: CommitData

    @property
    def committed_at(self) -> dt.datetime:
        return self.commit.committer.date
