"""Editor launcher for vimi."""

import logging
import subprocess
from typing import Callable

from ..errors import EditorError


logger = logging.getLogger(__name__)

SIGNAL_EXIT_BASE = 128


def open_in_editor(
    path: str,
    editor: str = "nvim",
    runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> int:
    """
    Open a file in the editor and wait for it to exit.
    
    The editor inherits the terminal's stdin, stdout and stderr.
    
    Args:
        path: File to open, passed as the editor's only argument
        editor: Editor executable
        runner: Callable with the ``subprocess.run`` signature
        
    Returns:
        The editor's exit status. A death by signal N is reported as
        128 + N, the way a shell reports it.
        
    Raises:
        EditorError: If the editor cannot be started
    """
    command = [editor, path]
    logger.debug(f"Launching editor: {command}")
    
    try:
        result = runner(command)
    except OSError as e:
        raise EditorError(f"cannot start editor {editor}: {e}") from e
    
    logger.debug(f"Editor exited with {result.returncode}")
    if result.returncode < 0:
        return SIGNAL_EXIT_BASE - result.returncode
    return result.returncode
