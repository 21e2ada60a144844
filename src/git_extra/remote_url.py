import re
from dataclasses import dataclass
from enum import Enum

from .errors import MalformedRemoteUrl

GIT_SUFFIX = ".git"


class Transport(Enum):
    SSH_SHORTHAND = "ssh-shorthand"
    SSH = "ssh"
    HTTPS = "https"
    GIT = "git"
    FILE = "file"


@dataclass(frozen=True)
class RemoteUrl:
    transport: Transport
    host: str
    path: tuple[str, ...]
    raw: str

    @property
    def repo(self) -> str:
        return self.path[-1]

    @property
    def owner(self) -> str:
        # Nested groups (GitLab subgroups) stay in the owner part.
        return "/".join(self.path[:-1])


# Tried in order; the first pattern that matches decides the transport.
RE_SSH_SHORTHAND = re.compile(r"^(?P<user>[^@/:\s]+)@(?P<host>[^@/:\s]+):(?P<path>.*)$")
RE_SCHEME = re.compile(
    r"^(?P<scheme>(?i:ssh|https|git))://"
    r"(?:(?P<userinfo>[^@/\s]+)@)?"
    r"(?P<host>[^@/:\s]+)"
    r"(?::(?P<port>\d*))?"
    r"(?P<path>/.*)?$"
)
RE_FILE = re.compile(r"^(?i:file):(?://)?(?P<path>.*)$")


def parse(raw: str) -> RemoteUrl:
    """Parse a single git remote URL into its transport, host and path segments.

    Accepts ``user@host:owner/repo.git``, ``ssh://``, ``https://``, ``git://``
    and ``file:`` URLs. Raises MalformedRemoteUrl for anything else, or when
    no path segment is left once empty segments and ``.git`` are removed.
    """
    url = raw.strip()

    if "://" not in url:
        match = RE_SSH_SHORTHAND.match(url)
        if match:
            return _build(raw, Transport.SSH_SHORTHAND, match["host"], match["path"])

    match = RE_SCHEME.match(url)
    if match:
        transport = Transport(match["scheme"].lower())
        return _build(raw, transport, match["host"], match["path"] or "")

    match = RE_FILE.match(url)
    if match:
        return _build(raw, Transport.FILE, "", match["path"])

    raise MalformedRemoteUrl(raw)


def split_path(path: str) -> tuple[str, ...]:
    segments = [segment for segment in path.split("/") if segment]
    if segments:
        last = segments.pop().removesuffix(GIT_SUFFIX)
        if last:
            segments.append(last)
    return tuple(segments)


def _build(raw: str, transport: Transport, host: str, path: str) -> RemoteUrl:
    segments = split_path(path)
    if not segments:
        raise MalformedRemoteUrl(raw, "no repository path in remote URL")
    return RemoteUrl(transport=transport, host=host, path=segments, raw=raw)
