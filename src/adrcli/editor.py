"""Open a file in the user's editor."""

import os
import shutil
import subprocess
from typing import Callable, Optional, Sequence

from adrcli.config import DEFAULT_EDITORS


def detect_editor(candidates: Sequence[str] = DEFAULT_EDITORS) -> list[str]:
    """Detect the editor to launch.

    Detection order: $VISUAL, $EDITOR, then the first of candidates found on PATH.

    Returns:
        Editor command as a list of strings

    Raises:
        RuntimeError: If no editor can be found
    """
    for var in ("VISUAL", "EDITOR"):
        value = os.environ.get(var)
        if value:
            return value.split()
    for candidate in candidates:
        if shutil.which(candidate):
            return [candidate]
    raise RuntimeError(
        "No editor found. Set $EDITOR or install one of: " + ", ".join(candidates)
    )


def launch_editor(
    path: str,
    candidates: Sequence[str] = DEFAULT_EDITORS,
    *,
    run_editor: Optional[Callable[[list[str]], int]] = None,
) -> None:
    """Open path in the detected editor and wait for it to exit.

    Args:
        path: File to edit
        candidates: Fallback editor executables, highest priority first
        run_editor: Callback to launch the editor, receives the command list
                    and returns its exit code. If None, uses subprocess.run.
    """
    cmd = detect_editor(candidates) + [path]
    if run_editor is not None:
        returncode = run_editor(cmd)
    else:
        returncode = subprocess.run(cmd, check=False).returncode
    if returncode != 0:
        raise RuntimeError(f"Editor {cmd[0]} exited with code {returncode}")
