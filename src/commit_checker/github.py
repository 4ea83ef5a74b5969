from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .config import EXCLUDED_REPOS
from .errors import DecodeError, NotFoundError, StatusError, TransportError
from .schemas import Commit, Repository

log = logging.getLogger(__name__)

API_URL = "https://api.github.com"

M = TypeVar("M", bound=BaseModel)


def _auth_headers(token: Optional[str]) -> Dict[str, str]:
    headers = {"Accept": "application/vnd.github+json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def split_repo(full_name: str) -> Tuple[str, str]:
    owner, name = full_name.split("/", 1)
    return owner, name


def make_client(base_url: str = API_URL, timeout: Optional[float] = 30) -> httpx.Client:
    return httpx.Client(base_url=base_url, timeout=timeout)


def _get_json(client: httpx.Client, path: str, token: str) -> Any:
    try:
        resp = client.get(path, headers=_auth_headers(token))
    except httpx.HTTPError as e:
        raise TransportError(f"sending request to {path}: {e}") from e

    if resp.status_code != httpx.codes.OK:
        message = None
        try:
            message = resp.json().get("message")
        except (ValueError, AttributeError):
            pass
        raise StatusError(str(resp.request.url), resp.status_code, message)

    try:
        return resp.json()
    except ValueError as e:
        raise DecodeError(f"decoding response from {path}: {e}") from e


def _decode_list(data: Any, model: Type[M], what: str) -> List[M]:
    if not isinstance(data, list):
        raise DecodeError(f"decoding {what}: expected a JSON array, got {type(data).__name__}")
    try:
        return TypeAdapter(List[model]).validate_python(data)  # type: ignore[valid-type]
    except ValidationError as e:
        raise DecodeError(f"decoding {what}: {e}") from e


def filter_public_repos(repos: Iterable[Repository], excluded: Iterable[str] = EXCLUDED_REPOS) -> List[Repository]:
    """Drop private repositories and those named in ``excluded``, keeping order."""
    skip = set(excluded)
    return [r for r in repos if not r.private and r.name not in skip]


def fetch_repositories(
    client: httpx.Client, token: str, excluded: Iterable[str] = EXCLUDED_REPOS
) -> List[Repository]:
    """List the token owner's repositories, public and not excluded only.

    Raises TransportError, StatusError or DecodeError.
    """
    data = _get_json(client, "/user/repos", token)
    repos = _decode_list(data, Repository, "repositories")
    public = filter_public_repos(repos, excluded)
    log.debug("Fetched %d repositories, %d public and not excluded", len(repos), len(public))
    return public


def fetch_commits(client: httpx.Client, repository: Repository, token: str) -> List[Commit]:
    owner, name = split_repo(repository.full_name)
    data = _get_json(client, f"/repos/{owner}/{name}/commits", token)
    commits = _decode_list(data, Commit, f"commits of {repository.full_name}")
    log.debug("Fetched %d commits for %s", len(commits), repository.full_name)
    return commits


def repo_by_name(repos: Iterable[Repository], name: str) -> Repository:
    for repo in repos:
        if repo.name == name:
            return repo
    raise NotFoundError(f"no repo named {name!r}")
