"""Decide whether today already has a commit.

The check is a best-effort notifier, not a gate: when GitHub cannot be reached
the verdict degrades to "no commit today" and the failure is logged and kept on
the returned :class:`TodayCheck`.
"""
from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import httpx

from .config import EXCLUDED_REPOS, STALE_AFTER_DAYS
from .errors import GitHubError
from .github import fetch_commits, fetch_repositories
from .schemas import Repository

log = logging.getLogger(__name__)


def date_of(ts: dt.datetime) -> dt.datetime:
    """Truncate ``ts`` to midnight of its UTC calendar date.

    Naive timestamps are taken to be UTC already.
    """
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=dt.timezone.utc)
    else:
        ts = ts.astimezone(dt.timezone.utc)
    return dt.datetime(ts.year, ts.month, ts.day, tzinfo=dt.timezone.utc)


def today_utc(now: Optional[dt.datetime] = None) -> dt.datetime:
    return date_of(now or dt.datetime.now(dt.timezone.utc))


def days_between(today: dt.datetime, ts: dt.datetime) -> int:
    return (date_of(today) - date_of(ts)).days


@dataclass
class TodayCheck:
    committed: bool
    repositories: List[Repository] = field(default_factory=list)
    error: Optional[GitHubError] = None


def _has_commit_on(
    client: httpx.Client,
    token: str,
    repos: Iterable[Repository],
    today: dt.datetime,
    stale_after_days: int,
) -> bool:
    for repo in repos:
        age = days_between(today, repo.updated_at)
        if age > stale_after_days:
            log.debug("Skipping %s, last updated %d days ago", repo.full_name, age)
            continue
        try:
            commits = fetch_commits(client, repo, token)
        except GitHubError as e:
            log.error("Error retrieving commits for repo %s: %s", repo.name, e)
            continue
        for commit in commits:
            if date_of(commit.committed_at) == today:
                log.info("Found commit %s in %s from today", commit.sha[:7], repo.full_name)
                return True
    return False


def check_today(
    client: httpx.Client,
    token: str,
    *,
    today: Optional[dt.datetime] = None,
    stale_after_days: int = STALE_AFTER_DAYS,
    excluded: Iterable[str] = EXCLUDED_REPOS,
) -> TodayCheck:
    """Look for a commit dated today in any public, recently updated repository.

    Repositories are inspected in listing order and commits in the order GitHub
    returns them; the first same-day commit ends the scan. Repositories updated
    more than ``stale_after_days`` days ago are skipped without fetching their
    commits.
    """
    error: Optional[GitHubError] = None
    try:
        repos = fetch_repositories(client, token, excluded)
    except GitHubError as e:
        log.error("Error retrieving public repos: %s", e)
        repos, error = [], e

    day = date_of(today) if today is not None else today_utc()
    committed = _has_commit_on(client, token, repos, day, stale_after_days)
    return TodayCheck(committed=committed, repositories=repos, error=error)


def did_commit_today(client: httpx.Client, token: str, **kwargs) -> bool:
    return check_today(client, token, **kwargs).committed
