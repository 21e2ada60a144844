from os import X_OK, access
from pathlib import Path

from .collaborators import RepoCloner, ScriptRunner
from .console import info
from .errors import (
    CloneError,
    CloneFailed,
    CustomizerFailed,
    CustomizerNotExecutable,
    CustomizerNotFound,
)
from .shortcuts import QuickStartRequest


def run(request: QuickStartRequest, cloner: RepoCloner, runner: ScriptRunner):
    """Clone ``request.origin_url`` and run its customization script inside the clone.

    BE CAREFUL! The customizer is executed as-is with the user's environment
    and no sandbox of any kind.
    """
    try:
        cloner.clone(request.origin_url, request.target_dir)
    except CloneError as exc:
        raise CloneFailed(request.origin_url, exc) from exc

    customizer = Path(request.target_dir, request.customizer_path)
    if not customizer.is_file():
        raise CustomizerNotFound(customizer)
    if not access(customizer, X_OK):
        raise CustomizerNotExecutable(customizer)

    info(f"Running the customization script '{customizer}'")
    exit_code = runner.execute(customizer, working_dir=request.target_dir)
    if exit_code != 0:
        raise CustomizerFailed(customizer, exit_code)
