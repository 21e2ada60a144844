import re
import tomllib
from dataclasses import dataclass
from os import getenv, path
from typing import Mapping, Optional

from .console import warn
from .errors import AmbiguousOrMissingTarget, ConfigError, ParseError
from .remote_url import GIT_SUFFIX, parse

DEFAULT_CUSTOMIZER_NAME = "customize"
REPOS_FILE_ENV = "GIT_EXTRA_REPOS_FILE"

RE_SSH_SHORTHAND_PREFIX = re.compile(r"^[^@/:\s]+@[^@/:\s]+:")
RE_URL_PREFIX = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:(//[^/]*)?")


@dataclass(frozen=True)
class RepoShortcut:
    name: str
    origin: str
    description: Optional[str] = None
    customizer: str = DEFAULT_CUSTOMIZER_NAME


@dataclass(frozen=True)
class QuickStartRequest:
    origin_url: str
    target_dir: str
    customizer_path: str


def default_repos_file() -> str:
    return getenv(REPOS_FILE_ENV) or path.join(
        path.expanduser("~"), ".config", "git_extra", "repos.toml"
    )


def load_shortcuts(repos_file: Optional[str] = None) -> dict[str, RepoShortcut]:
    """Read the named repositories from a TOML file.

    Each top-level table is one shortcut::

        [rust-cli]
        description = "Rust command line tool"
        origin = "git@github.com:acme/rust-cli-quickstart.git"
        customizer = "customize.sh"

    A missing file is not an error: a warning is printed and no shortcuts
    are returned.
    """
    repos_file = repos_file or default_repos_file()

    try:
        with open(repos_file, "rb") as file:
            document = tomllib.load(file)
    except FileNotFoundError:
        warn(f"'{repos_file}' not found")
        return {}
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in '{repos_file}': {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"'{repos_file}' is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read '{repos_file}': {exc}") from exc

    shortcuts: dict[str, RepoShortcut] = {}
    for name, entry in document.items():
        shortcuts[name] = shortcut_from_entry(repos_file, name, entry)
    return shortcuts


def shortcut_from_entry(repos_file: str, name: str, entry: object) -> RepoShortcut:
    if not isinstance(entry, dict):
        raise ConfigError(f"Entry '{name}' in '{repos_file}' must be a table")

    origin = entry.get("origin")
    if not isinstance(origin, str) or not origin:
        raise ConfigError(f"Entry '{name}' in '{repos_file}' has no 'origin'")

    for key in ("description", "customizer"):
        if key in entry and not isinstance(entry[key], str):
            raise ConfigError(f"'{key}' of entry '{name}' in '{repos_file}' must be a string")

    return RepoShortcut(
        name=name,
        origin=origin,
        description=entry.get("description"),
        customizer=entry.get("customizer") or DEFAULT_CUSTOMIZER_NAME,
    )


def looks_like_url(name_or_url: str) -> bool:
    return (
        "://" in name_or_url
        or name_or_url.lower().startswith("file:")
        or bool(RE_SSH_SHORTHAND_PREFIX.match(name_or_url))
    )


def repo_name_from_url(origin_url: str) -> str:
    try:
        return parse(origin_url).repo
    except ParseError:
        # http:// and local paths; the host never names the repo.
        location = RE_URL_PREFIX.sub("", origin_url.strip())
    segments = [segment for segment in re.split(r"[/:]", location) if segment]
    if not segments:
        return ""
    return segments[-1].removesuffix(GIT_SUFFIX)


def resolve(
    name_or_url: str,
    shortcuts: Mapping[str, RepoShortcut],
    explicit_dir: Optional[str] = None,
    explicit_customizer: Optional[str] = None,
) -> QuickStartRequest:
    shortcut = shortcuts.get(name_or_url)

    if shortcut is not None:
        origin_url = shortcut.origin
        customizer = explicit_customizer or shortcut.customizer
    elif looks_like_url(name_or_url):
        origin_url = name_or_url
        customizer = explicit_customizer or DEFAULT_CUSTOMIZER_NAME
    else:
        raise AmbiguousOrMissingTarget(name_or_url)

    target_dir = explicit_dir or repo_name_from_url(origin_url)
    if not target_dir:
        raise AmbiguousOrMissingTarget(name_or_url)

    return QuickStartRequest(
        origin_url=origin_url, target_dir=target_dir, customizer_path=customizer
    )


def format_listing(shortcuts: Mapping[str, RepoShortcut]) -> list[str]:
    if not shortcuts:
        return []

    width = max(len(name) for name in shortcuts) + 3
    lines: list[str] = []
    for name in sorted(shortcuts):
        shortcut = shortcuts[name]
        lines.append(f"{name:{width}} {shortcut.origin}")
        if shortcut.description:
            lines.append(f"{'':{width}} {shortcut.description}")
    return lines
