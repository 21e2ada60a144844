import subprocess
import webbrowser
from abc import ABC, abstractmethod
from dataclasses import dataclass
from os import PathLike, path
from pathlib import Path
from typing import Iterable, Union

from git.exc import CommandError, InvalidGitRepositoryError, NoSuchPathError
from git.repo import Repo

from .errors import CloneError, OpenError, RemoteListingFailed, RunError

StrPath = Union[str, PathLike]


@dataclass(frozen=True)
class RemoteEntry:
    name: str
    url: str
    direction: str


def parse_remote_listing(lines: Iterable[str]) -> list[RemoteEntry]:
    """Parse ``git remote -v`` output lines of the form ``name<TAB>url (fetch)``.

    Lines that do not end with a ``(fetch)`` or ``(push)`` annotation are skipped.
    """
    entries: list[RemoteEntry] = []
    for line in lines:
        parts = line.split()
        if len(parts) < 3:
            continue
        direction = parts[-1]
        if direction not in ("(fetch)", "(push)"):
            continue
        entries.append(
            RemoteEntry(
                name=parts[0],
                url=" ".join(parts[1:-1]),
                direction=direction.strip("()"),
            )
        )
    return entries


class RemoteLister(ABC):
    @abstractmethod
    def raw_listing(self) -> list[str]: ...

    def list_remotes(self) -> list[RemoteEntry]:
        return parse_remote_listing(self.raw_listing())


class BrowserOpener(ABC):
    @abstractmethod
    def open(self, url: str) -> None: ...


class RepoCloner(ABC):
    @abstractmethod
    def clone(self, origin_url: str, target_dir: StrPath) -> None: ...


class ScriptRunner(ABC):
    @abstractmethod
    def execute(self, script: StrPath, working_dir: StrPath) -> int: ...


class GitRemoteLister(RemoteLister):
    def __init__(self, repo_path: StrPath = "."):
        self.repo_path = repo_path

    def raw_listing(self) -> list[str]:
        try:
            repo = Repo(self.repo_path, search_parent_directories=True)
            output = repo.git.remote("-v")
        except (InvalidGitRepositoryError, NoSuchPathError) as exc:
            raise RemoteListingFailed(f"Not a Git repository: {self.repo_path}") from exc
        except CommandError as exc:
            raise RemoteListingFailed(
                f"`git remote -v` failed: {str(exc.stderr).strip() or exc}"
            ) from exc
        return str(output).splitlines()


class WebBrowserOpener(BrowserOpener):
    def open(self, url: str) -> None:
        try:
            opened = webbrowser.open(url)
        except webbrowser.Error as exc:
            raise OpenError(f"Unable to open '{url}': {exc}") from exc
        if not opened:
            raise OpenError(f"No browser available to open '{url}'")


class GitRepoCloner(RepoCloner):
    def clone(self, origin_url: str, target_dir: StrPath) -> None:
        target = Path(target_dir)
        if target.exists() and (not target.is_dir() or any(target.iterdir())):
            raise CloneError(f"Destination '{target}' already exists and is not an empty directory")
        try:
            Repo.clone_from(origin_url, str(target))
        except CommandError as exc:
            raise CloneError(str(exc.stderr).strip() or str(exc)) from exc


class SubprocessScriptRunner(ScriptRunner):
    """Runs a customization script with no sandbox.

    The script inherits the standard streams and the environment and gets the
    project name (the base name of ``working_dir``) as its only argument.
    """

    def execute(self, script: StrPath, working_dir: StrPath) -> int:
        project_name = path.basename(path.abspath(working_dir))
        try:
            completed = subprocess.run(
                [path.abspath(script), project_name], cwd=working_dir
            )
        except OSError as exc:
            raise RunError(f"Unable to run '{script}': {exc}") from exc
        return completed.returncode

