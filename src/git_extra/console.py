import sys
from typing import NoReturn

program = "git-extra"


def info(message: str):
    print(f"{program} info: {message}")


def warn(message: str):
    print(f"{program} warning: {message}", file=sys.stderr)


def error(message: str):
    print(f"{program} error: {message}", file=sys.stderr)


def fail(message: str, exit_code: int = 1) -> NoReturn:
    error(message)
    raise SystemExit(exit_code)
