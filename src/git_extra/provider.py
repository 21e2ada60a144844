from enum import Enum
from typing import Callable

from .errors import UnsupportedProviderError
from .remote_url import RemoteUrl


class Provider(Enum):
    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"
    GITEA = "gitea"
    UNKNOWN = "unknown"


KNOWN_HOSTS = {
    "github.com": Provider.GITHUB,
    "gitlab.com": Provider.GITLAB,
    "bitbucket.org": Provider.BITBUCKET,
}


def classify(host: str) -> Provider:
    if not host:
        return Provider.UNKNOWN

    # Any other host is assumed to be a self-hosted Gitea instance.
    return KNOWN_HOSTS.get(host.lower(), Provider.GITEA)


def owner_repo_url(host: str, owner: str, repo: str) -> str:
    path = "/".join(part for part in (owner, repo) if part)
    return f"https://{host}/{path}"


URL_TEMPLATES: dict[Provider, Callable[[str, str, str], str]] = {
    Provider.GITHUB: owner_repo_url,
    Provider.GITLAB: owner_repo_url,
    Provider.BITBUCKET: owner_repo_url,
    Provider.GITEA: owner_repo_url,
}


def build_browse_url(provider: Provider, owner: str, repo: str, host: str) -> str:
    template = URL_TEMPLATES.get(provider)
    if template is None:
        raise UnsupportedProviderError(
            f"No web page for {provider.value} provider (host '{host}', repository '{repo}')."
        )
    return template(host, owner, repo)


def browse_url_for(remote: RemoteUrl) -> str:
    provider = classify(remote.host)
    if provider is Provider.UNKNOWN:
        raise UnsupportedProviderError(
            f"Remote '{remote.raw}' is a local {remote.transport.value} remote with no web page."
        )
    return build_browse_url(provider, remote.owner, remote.repo, remote.host)
