from typing import Iterable

from .collaborators import BrowserOpener, RemoteEntry, parse_remote_listing
from .console import info
from .errors import BrowseError, GitExtraError, NoOriginRemote
from .provider import browse_url_for
from .remote_url import parse

ORIGIN = "origin"


def select_origin(entries: list[RemoteEntry]) -> RemoteEntry:
    origins = [entry for entry in entries if entry.name == ORIGIN]
    if not origins:
        raise NoOriginRemote(ORIGIN)
    fetch = next((entry for entry in origins if entry.direction == "fetch"), None)
    return fetch or origins[0]


def browse(remote_listing: Iterable[str], opener: BrowserOpener) -> str:
    """Open the web page of the ``origin`` remote found in ``git remote -v`` output.

    Returns the URL handed to the opener. Failures are raised as BrowseError
    (chained to the underlying cause) and the opener is not called.
    """
    origin = select_origin(parse_remote_listing(remote_listing))

    try:
        url = browse_url_for(parse(origin.url))
    except GitExtraError as exc:
        raise BrowseError(f"Cannot browse remote '{origin.name}': {exc}") from exc

    info(f"Opening URL '{url}'")
    try:
        opener.open(url)
    except GitExtraError as exc:
        raise BrowseError(f"Cannot browse remote '{origin.name}': {exc}") from exc

    return url
