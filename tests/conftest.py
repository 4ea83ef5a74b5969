import pytest

from commit_checker.github import API_URL, make_client


@pytest.fixture
def client():
    with make_client(API_URL, timeout=5) as c:
        yield c


@pytest.fixture
def repo_json():
    def _make(name, updated_at="2024-06-14T10:00:00Z", private=False, owner="alice", language="Go"):
        return {
            "id": 1,
            "name": name,
            "full_name": f"{owner}/{name}",
            "private": private,
            "updated_at": updated_at,
            "ssh_url": f"git@github.com:{owner}/{name}.git",
            "clone_url": f"https://github.com/{owner}/{name}.git",
            "language": language,
        }

    return _make


@pytest.fixture
def commit_json():
    def _make(date, sha="abc1234def"):
        return {
            "sha": sha,
            "commit": {
                "author": {"name": "Alice", "date": date},
                "committer": {"name": "Alice", "date": date},
                "message": "wip",
            },
        }

    return _make
