from pathlib import Path
from typing import Optional

import pytest

from git_extra.collaborators import (
    BrowserOpener,
    RemoteLister,
    RepoCloner,
    ScriptRunner,
)
from git_extra.errors import CloneError, OpenError


class FakeRemoteLister(RemoteLister):
    def __init__(self, lines: list[str]):
        self.lines = lines

    def raw_listing(self) -> list[str]:
        return self.lines


class FakeOpener(BrowserOpener):
    def __init__(self, fails: bool = False):
        self.fails = fails
        self.opened: list[str] = []

    def open(self, url: str) -> None:
        if self.fails:
            raise OpenError(f"cannot open {url}")
        self.opened.append(url)


class FakeCloner(RepoCloner):
    """Creates the target directory with the given files instead of cloning."""

    def __init__(self, files: Optional[dict[str, str]] = None, executable: bool = True, error: Optional[str] = None):
        self.files = files or {}
        self.executable = executable
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def clone(self, origin_url, target_dir) -> None:
        self.calls.append((origin_url, str(target_dir)))
        if self.error:
            raise CloneError(self.error)
        target = Path(target_dir)
        target.mkdir(parents=True)
        for name, content in self.files.items():
            file = target / name
            file.parent.mkdir(parents=True, exist_ok=True)
            file.write_text(content)
            file.chmod(0o755 if self.executable else 0o644)


class FakeRunner(ScriptRunner):
    def __init__(self, exit_code: int = 0):
        self.exit_code = exit_code
        self.calls: list[tuple[str, str]] = []

    def execute(self, script, working_dir) -> int:
        self.calls.append((str(script), str(working_dir)))
        return self.exit_code


@pytest.fixture
def opener() -> FakeOpener:
    return FakeOpener()


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def repos_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "repos.toml"
    monkeypatch.setenv("GIT_EXTRA_REPOS_FILE", str(path))
    return path
