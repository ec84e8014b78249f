"""
Interactive picker adapter for vimi.

Candidates are piped into ``fzf`` and the chosen line is read back from its
standard output. The picker draws its interface on the terminal, so its
standard error is left attached to ours.
"""

import shutil
import logging
import subprocess
from typing import Callable, List, Optional

from ..errors import PickError
from ..models.config import PreviewConfig
from ..models.search_options import ItemType, Selection


logger = logging.getLogger(__name__)

PICKER_SELECTED = 0
PICKER_NO_MATCH = 1
PICKER_INTERRUPTED = 130


def interpret_picker_exit(returncode: int) -> bool:
    """
    Map a picker exit status to an outcome.
    
    fzf exits 1 when nothing matched and 130 when interrupted with Ctrl-C or
    Esc. Both are an empty selection, never a failure, even if a future fzf
    tells them apart more precisely.
    
    Args:
        returncode: Exit status of the picker process
        
    Returns:
        True if a selection was made, False for an empty selection
        
    Raises:
        PickError: For any other non-zero status
    """
    if returncode == PICKER_SELECTED:
        return True
    if returncode in (PICKER_NO_MATCH, PICKER_INTERRUPTED):
        return False
    raise PickError(f"fzf failed: exit status {returncode}", returncode=returncode)


def build_preview_args(
    enabled: bool,
    item_type: ItemType,
    which: Callable[[str], Optional[str]] = shutil.which,
    preview: Optional[PreviewConfig] = None,
) -> List[str]:
    """
    Build the picker's preview pane arguments.
    
    File previews need the syntax highlighter; without it no preview is
    attached. Directory previews only need ``ls``.
    
    Args:
        enabled: Whether the user asked for a preview pane
        item_type: Kind of entries being picked
        which: Executable lookup, ``shutil.which`` by default
        preview: Preview settings (defaults to PreviewConfig())
        
    Returns:
        List of picker arguments, empty when no preview applies
    """
    if not enabled:
        return []
    
    preview = preview or PreviewConfig()
    window = f"--preview-window={preview.window}"
    
    if item_type is ItemType.FILE:
        if which(preview.highlighter):
            return ["--ansi", window, f"--preview={preview.file_preview_command()}"]
        logger.debug(f"{preview.highlighter} not found, file preview disabled")
        return []
    
    if item_type is ItemType.DIRECTORY:
        return ["--ansi", window, f"--preview={preview.directory_preview_command()}"]
    
    return []


def pick(
    candidates: str,
    picker_args: Optional[List[str]] = None,
    runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    picker: str = "fzf",
) -> Selection:
    """
    Let the user choose one candidate interactively.
    
    Args:
        candidates: Newline-delimited candidate list
        picker_args: Extra picker arguments, e.g. the preview configuration
        runner: Callable with the ``subprocess.run`` signature
        picker: Picker executable
        
    Returns:
        The selection, empty if the user cancelled or nothing matched
        
    Raises:
        PickError: If the picker cannot start or fails
    """
    command = [picker] + list(picker_args or [])
    logger.debug(f"Running picker: {command}")
    
    try:
        result = runner(
            command,
            input=candidates,
            stdout=subprocess.PIPE,
            text=True,
            errors="surrogateescape",
        )
    except OSError as e:
        raise PickError(f"fzf failed: {e}") from e
    
    if not interpret_picker_exit(result.returncode):
        logger.debug(f"Picker exited with {result.returncode}, no selection")
        return Selection.empty()
    
    return Selection(path=result.stdout or "")
