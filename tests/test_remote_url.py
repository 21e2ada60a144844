import pytest

from git_extra.errors import MalformedRemoteUrl, ParseError
from git_extra.remote_url import Transport, parse


@pytest.mark.parametrize(
    "host, owner, repo",
    [
        ("github.com", "acme", "widgets"),
        ("gitlab.com", "some-group", "some_project"),
        ("git.example.org", "jane.doe", "dotfiles"),
    ],
)
def test_parse_ssh_shorthand(host: str, owner: str, repo: str):
    remote = parse(f"git@{host}:{owner}/{repo}.git")
    assert remote.transport is Transport.SSH_SHORTHAND
    assert remote.host == host
    assert remote.path == (owner, repo)


def test_parse_ssh_shorthand_without_git_suffix():
    remote = parse("deploy@bitbucket.org:team/service")
    assert remote.transport is Transport.SSH_SHORTHAND
    assert remote.path == ("team", "service")


def test_parse_https_with_credentials_and_trailing_slash():
    remote = parse("https://user@github.com/acme/widgets.git/")
    assert remote.transport is Transport.HTTPS
    assert remote.host == "github.com"
    assert remote.owner == "acme"
    assert remote.repo == "widgets"


def test_parse_ssh_scheme_with_port():
    remote = parse("ssh://git@git.example.org:2222/acme/widgets.git")
    assert remote.transport is Transport.SSH
    assert remote.host == "git.example.org"
    assert remote.path == ("acme", "widgets")


def test_parse_git_scheme():
    remote = parse("git://git.kernel.org/pub/scm/git/git.git")
    assert remote.transport is Transport.GIT
    assert remote.owner == "pub/scm/git"
    assert remote.repo == "git"


def test_parse_scheme_is_case_insensitive():
    assert parse("HTTPS://github.com/acme/widgets").transport is Transport.HTTPS


def test_parse_keeps_gitlab_subgroups_in_owner():
    remote = parse("git@gitlab.com:group/subgroup/project.git")
    assert remote.owner == "group/subgroup"
    assert remote.repo == "project"


@pytest.mark.parametrize("raw", ["file:///srv/git/project.git", "file:/srv/git/project"])
def test_parse_file_urls_have_no_host(raw: str):
    remote = parse(raw)
    assert remote.transport is Transport.FILE
    assert remote.host == ""
    assert remote.path == ("srv", "git", "project")


def test_parse_keeps_raw_and_ignores_surrounding_whitespace():
    remote = parse("  git@github.com:acme/widgets.git\n")
    assert remote.raw == "  git@github.com:acme/widgets.git\n"
    assert remote.path == ("acme", "widgets")


def test_parse_single_segment_path():
    remote = parse("https://git.example.org/widgets.git")
    assert remote.owner == ""
    assert remote.repo == "widgets"


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "not a url",
        "/home/me/project",
        "ftp://example.org/acme/widgets.git",
        "https://github.com",
        "https://github.com/",
        "git@github.com:",
        "git@github.com:/.git",
        "file://",
    ],
)
def test_parse_rejects_malformed_urls(raw: str):
    with pytest.raises(MalformedRemoteUrl) as excinfo:
        parse(raw)
    assert excinfo.value.raw == raw
    assert isinstance(excinfo.value, ParseError)


def test_remote_url_is_immutable():
    remote = parse("git@github.com:acme/widgets.git")
    with pytest.raises(AttributeError):
        remote.host = "gitlab.com"  # type: ignore
