from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, List, Sequence

from .schemas import Repository

InputFunc = Callable[[str], str]


def _ask_index(question: str, count: int, input_func: InputFunc) -> int:
    """Ask until the answer is a number in 1..count; return it zero-based."""
    while True:
        print()
        print(question)
        answer = input_func("> ").strip()
        try:
            choice = int(answer)
        except ValueError:
            print("Please enter a number", file=sys.stderr)
            continue
        if choice < 1 or choice > count:
            print(f"Please enter a number between 1 and {count}", file=sys.stderr)
            continue
        return choice - 1


def select_repo(repos: Sequence[Repository], input_func: InputFunc = input) -> Repository:
    print()
    print("Select a repo:")
    for i, repo in enumerate(repos, start=1):
        print(f"{i}: {repo.name} [{repo.language or ''}]")
    return repos[_ask_index("Please enter a repo id: ", len(repos), input_func)]


def confirm_clone(repo_name: str, input_func: InputFunc = input) -> bool:
    print()
    print(f"The repo ({repo_name}) currently does not exist locally.")
    while True:
        answer = input_func("Do you want to clone it? [Y/n] ").strip().lower()
        if answer in ("y", "ye", "yes"):
            return True
        if answer in ("n", "no"):
            return False


def select_target_dir(project_paths: List[Path], input_func: InputFunc = input) -> Path:
    print()
    for i, path in enumerate(project_paths, start=1):
        print(f"{i}: {path}")
    target = project_paths[_ask_index("In which project directory?", len(project_paths), input_func)]
    print()
    return target
