from __future__ import annotations

import json
import subprocess
from pathlib import Path

GIT_ENV = {
    "GIT_AUTHOR_NAME": "test",
    "GIT_AUTHOR_EMAIL": "test@example.com",
    "GIT_COMMITTER_NAME": "test",
    "GIT_COMMITTER_EMAIL": "test@example.com",
}

RECORDER = """\
import json
import sys

with open(sys.argv[1], "w") as f:
    json.dump(sys.argv[2:], f)
"""


def git(*args: str, cwd: Path | None = None) -> str:
    output = subprocess.run(
        ["git", *args], cwd=cwd, check=True, capture_output=True, text=True
    )
    return output.stdout.strip()


class Upstream:
    """Local repository standing in for the remote arceos tree."""

    def __init__(self, path: Path) -> None:
        self.path = path
        git("init", str(path))
        git("symbolic-ref", "HEAD", "refs/heads/main", cwd=path)
        self.commits: list[str] = []
        for name in ("a", "b", "c"):
            self.commit(name)
        git("branch", "dev", self.commits[0], cwd=path)

    def commit(self, name: str) -> str:
        (self.path / name).write_text(name)
        git("add", name, cwd=self.path)
        git("commit", "-m", f"Add {name}", cwd=self.path)
        commit = git("rev-parse", "--short", "HEAD", cwd=self.path)
        self.commits.append(commit)
        return commit

    @property
    def url(self) -> str:
        return str(self.path)


def recorded_args(record: Path) -> list[str]:
    return json.loads(record.read_text())
