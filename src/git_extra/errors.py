from pathlib import Path
from typing import Union


class GitExtraError(Exception):
    """Base class for every terminal failure reported by git-extra."""


class ParseError(GitExtraError):
    pass


class MalformedRemoteUrl(ParseError):
    def __init__(self, raw: str, reason: str = "unrecognized remote URL"):
        super().__init__(f"{reason}: '{raw}'")
        self.raw = raw


class UnsupportedProviderError(GitExtraError):
    pass


class BrowseError(GitExtraError):
    pass


class NoOriginRemote(BrowseError):
    def __init__(self, remote_name: str = "origin"):
        super().__init__(f"No remote named '{remote_name}' found.")
        self.remote_name = remote_name


class RemoteListingFailed(GitExtraError):
    pass


class OpenError(GitExtraError):
    pass


class ResolveError(GitExtraError):
    pass


class AmbiguousOrMissingTarget(ResolveError):
    def __init__(self, name_or_url: str):
        super().__init__(
            f"Repository name '{name_or_url}' is not a known shortcut "
            "and does not look like https://, ssh://, git://, git@ or file: URL"
        )
        self.name_or_url = name_or_url


class ConfigError(GitExtraError):
    pass


class CloneError(GitExtraError):
    pass


class RunError(GitExtraError):
    pass


class QuickStartError(GitExtraError):
    pass


class CloneFailed(QuickStartError):
    def __init__(self, origin_url: str, cause: Exception):
        super().__init__(f"Unable to run `git clone` for '{origin_url}': {cause}")
        self.origin_url = origin_url


class CustomizerNotFound(QuickStartError):
    def __init__(self, path: Union[str, Path]):
        super().__init__(f"Customization file '{path}' not found")
        self.path = str(path)


class CustomizerNotExecutable(QuickStartError):
    def __init__(self, path: Union[str, Path]):
        super().__init__(f"Customization file '{path}' is not executable")
        self.path = str(path)


class CustomizerFailed(QuickStartError):
    def __init__(self, path: Union[str, Path], exit_code: int):
        super().__init__(
            f"There was a problem running customizer file '{path}' (exit code {exit_code})"
        )
        self.path = str(path)
        self.exit_code = exit_code
