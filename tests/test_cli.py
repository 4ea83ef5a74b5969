import subprocess

import pytest

from commit_checker import cli
from commit_checker.config import Settings
from commit_checker.errors import TransportError
from commit_checker.recency import TodayCheck
from commit_checker.schemas import Repository


def make_repo(name):
    return Repository(
        name=name,
        full_name=f"alice/{name}",
        private=False,
        updated_at="2024-06-14T10:00:00Z",
        ssh_url=f"git@github.com:alice/{name}.git",
        language="Go",
    )


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        GITHUB_TOKEN="t0k3n",
        PROJECTS_ROOT=str(tmp_path / "projects"),
        PROJECT_SUBDIRS="golang",
        SESSIONIZER_SCRIPT=str(tmp_path / "sessionizer"),
    )


@pytest.fixture
def calls(monkeypatch):
    recorded = []
    monkeypatch.setattr(cli, "run_sessionizer", lambda path, script: recorded.append(("session", path)))
    monkeypatch.setattr(cli, "clone_repo", lambda url, path: recorded.append(("clone", url, path)))
    return recorded


def stub_check(monkeypatch, result):
    monkeypatch.setattr(cli, "check_today", lambda client, token: result)


def test_missing_token_exits_1(monkeypatch, calls):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    assert cli.main(Settings(_env_file=None)) == 1
    assert calls == []


def test_committed_today(monkeypatch, settings, calls, capsys):
    stub_check(monkeypatch, TodayCheck(committed=True, repositories=[make_repo("a")]))

    assert cli.main(settings) == 0
    assert cli.NICE_PROMPT in capsys.readouterr().out
    assert calls == []


def test_existing_checkout_opens_session(monkeypatch, settings, calls):
    local = settings.projects_root / "golang" / "habits"
    local.mkdir(parents=True)
    stub_check(monkeypatch, TodayCheck(committed=False, repositories=[make_repo("habits")]))
    monkeypatch.setattr(cli, "select_repo", lambda repos: repos[0])

    assert cli.main(settings) == 0
    assert calls == [("session", local)]


def test_decline_clone(monkeypatch, settings, calls):
    stub_check(monkeypatch, TodayCheck(committed=False, repositories=[make_repo("habits")]))
    monkeypatch.setattr(cli, "select_repo", lambda repos: repos[0])
    monkeypatch.setattr(cli, "confirm_clone", lambda name: False)

    assert cli.main(settings) == 0
    assert calls == []


def test_clone_then_session(monkeypatch, settings, calls):
    stub_check(monkeypatch, TodayCheck(committed=False, repositories=[make_repo("habits")]))
    monkeypatch.setattr(cli, "select_repo", lambda repos: repos[0])
    monkeypatch.setattr(cli, "confirm_clone", lambda name: True)
    monkeypatch.setattr(cli, "select_target_dir", lambda paths: paths[1])

    target = settings.projects_root / "golang" / "habits"
    assert cli.main(settings) == 0
    assert calls == [("clone", "git@github.com:alice/habits.git", target), ("session", target)]


def test_clone_failure_exits_1(monkeypatch, settings, calls, capsys):
    def failing_clone(url, path):
        raise subprocess.CalledProcessError(128, ["git", "clone", url, str(path)])

    stub_check(monkeypatch, TodayCheck(committed=False, repositories=[make_repo("habits")]))
    monkeypatch.setattr(cli, "select_repo", lambda repos: repos[0])
    monkeypatch.setattr(cli, "confirm_clone", lambda name: True)
    monkeypatch.setattr(cli, "select_target_dir", lambda paths: paths[0])
    monkeypatch.setattr(cli, "clone_repo", failing_clone)

    assert cli.main(settings) == 1
    assert "Error cloning repo" in capsys.readouterr().err
    assert calls == []


def test_session_script_failure_exits_1(monkeypatch, settings):
    def failing_session(path, script):
        raise subprocess.CalledProcessError(1, ["/bin/bash", str(script), str(path)])

    (settings.projects_root / "habits").mkdir(parents=True)
    stub_check(monkeypatch, TodayCheck(committed=False, repositories=[make_repo("habits")]))
    monkeypatch.setattr(cli, "select_repo", lambda repos: repos[0])
    monkeypatch.setattr(cli, "run_sessionizer", failing_session)

    assert cli.main(settings) == 1


def test_nothing_to_offer(monkeypatch, settings, calls, capsys):
    stub_check(monkeypatch, TodayCheck(committed=False))
    assert cli.main(settings) == 0
    assert "No public repositories" in capsys.readouterr().out


def test_listing_failure_with_nothing_to_offer(monkeypatch, settings, calls):
    stub_check(monkeypatch, TodayCheck(committed=False, error=TransportError("down")))
    assert cli.main(settings) == 1


def test_interrupted_prompt_exits_1(monkeypatch, settings, calls):
    def interrupted(repos):
        raise EOFError

    stub_check(monkeypatch, TodayCheck(committed=False, repositories=[make_repo("habits")]))
    monkeypatch.setattr(cli, "select_repo", interrupted)

    assert cli.main(settings) == 1
    assert calls == []


def test_invalid_log_level_exits_1(monkeypatch, calls, capsys):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    monkeypatch.setattr(cli, "get_settings", lambda: Settings(_env_file=None))

    assert cli.main() == 1
    assert "LOG_LEVEL" in capsys.readouterr().err
    assert calls == []
