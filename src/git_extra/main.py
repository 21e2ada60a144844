import sys
from argparse import ArgumentParser
from typing import Optional

from dotenv import load_dotenv

from git_extra.browse import browse
from git_extra.collaborators import (
    BrowserOpener,
    GitRemoteLister,
    GitRepoCloner,
    RemoteLister,
    RepoCloner,
    ScriptRunner,
    SubprocessScriptRunner,
    WebBrowserOpener,
)
from git_extra.console import fail, info, program
from git_extra.errors import CustomizerFailed, GitExtraError
from git_extra.quick_start import run
from git_extra.shortcuts import format_listing, load_shortcuts, resolve

version = "0.1.0"


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog=program, description="Extra Git sub-commands.")
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {version}"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("browse", help="Browse to origin repository web page")

    quick_start = commands.add_parser(
        "quick-start",
        help="Create a new project by cloning a repo and running a customization script",
    )
    quick_start.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="List all available named repositories",
    )
    quick_start.add_argument(
        "url_or_name", nargs="?", help="A name or URL of a Git repository to clone"
    )
    quick_start.add_argument(
        "directory", nargs="?", help="Name of the directory to clone the repo into"
    )
    quick_start.add_argument(
        "-c",
        "--customizer",
        help="The name of the customization file relative to the new project directory",
    )
    return parser


def main(
    argv: Optional[list[str]] = None,
    remote_lister: Optional[RemoteLister] = None,
    opener: Optional[BrowserOpener] = None,
    cloner: Optional[RepoCloner] = None,
    runner: Optional[ScriptRunner] = None,
):
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv()

    try:
        if args.command == "browse":
            browse_remote(remote_lister or GitRemoteLister(), opener or WebBrowserOpener())
        elif args.list:
            if args.url_or_name:
                parser.error("--list does not take a repository name or URL")
            list_shortcuts()
        elif args.url_or_name:
            quick_start(
                args.url_or_name,
                args.directory,
                args.customizer,
                cloner or GitRepoCloner(),
                runner or SubprocessScriptRunner(),
            )
        else:
            parser.error("quick-start requires a repository name or URL, or --list")
    except CustomizerFailed as exc:
        fail(str(exc), shell_exit_code(exc.exit_code))
    except GitExtraError as exc:
        fail(str(exc))


def shell_exit_code(returncode: int) -> int:
    # A child killed by signal N reports -N; shells report 128 + N.
    return 128 - returncode if returncode < 0 else returncode


def browse_remote(remote_lister: RemoteLister, opener: BrowserOpener):
    browse(remote_lister.raw_listing(), opener)


def list_shortcuts():
    for line in format_listing(load_shortcuts()):
        print(line)


def quick_start(
    url_or_name: str,
    directory: Optional[str],
    customizer: Optional[str],
    cloner: RepoCloner,
    runner: ScriptRunner,
):
    request = resolve(url_or_name, load_shortcuts(), directory, customizer)
    info(f"Cloning '{request.origin_url}' into '{request.target_dir}'")
    run(request, cloner, runner)


def browse_main():
    main(["browse", *sys.argv[1:]])


def quick_start_main():
    main(["quick-start", *sys.argv[1:]])


if __name__ == "__main__":
    main()
