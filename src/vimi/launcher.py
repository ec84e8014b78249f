"""
Run orchestration for vimi.

A run is one linear pass: enumerate candidates, let the user pick one, then
print it (directory mode) or open it in the editor (file mode). Nothing is
retried and no state survives the run.
"""

import sys
import shutil
import logging
import subprocess
from typing import Callable, List, Optional, TextIO

from .models.config import VimiConfig
from .models.search_options import SearchOptions, Selection, RunPlan
from .tools.enumerators import Searcher, choose_searcher
from .tools.picker import build_preview_args, pick
from .tools.editor import open_in_editor


logger = logging.getLogger(__name__)

NO_SELECTION_MESSAGE = "No file selected."


class Launcher:
    """
    Chains the enumerator, the picker and the editor for a single run.
    
    The executable lookup, the process runner and the output streams are
    injectable so a run can be exercised without any real child process.
    """
    
    def __init__(
        self,
        config: Optional[VimiConfig] = None,
        which: Callable[[str], Optional[str]] = shutil.which,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.config = config or VimiConfig()
        self.which = which
        self.runner = runner
        self.stdout = stdout
        self.stderr = stderr
        self._searcher: Optional[Searcher] = None
    
    @property
    def searcher(self) -> Searcher:
        """The enumeration backend, probed on first use and then fixed."""
        if self._searcher is None:
            self._searcher = choose_searcher(
                which=self.which,
                config=self.config.enumerator,
                runner=self.runner,
            )
        return self._searcher
    
    def picker_args(self, options: SearchOptions, preview: bool) -> List[str]:
        return build_preview_args(
            preview,
            options.item_type,
            which=self.which,
            preview=self.config.preview,
        )
    
    def plan(self, options: SearchOptions, preview: bool = False) -> RunPlan:
        """
        Describe what a run with these options would execute.
        
        Raises:
            BackendUnavailable: If no enumeration backend is installed
        """
        return RunPlan(
            options=options,
            backend=self.searcher.name,
            enumerator_command=self.searcher.build_command(options),
            picker_command=[self.config.picker] + self.picker_args(options, preview),
            editor_command=[] if options.is_directory_search else [self.config.editor],
        )
    
    def dispatch(self, options: SearchOptions, selection: Selection) -> int:
        """
        Act on a selection.
        
        Returns:
            0 for an empty selection or a printed directory, otherwise the
            editor's exit status
        """
        if selection.is_empty():
            if not options.is_directory_search:
                print(NO_SELECTION_MESSAGE, file=self.stderr or sys.stderr)
            return 0
        
        if options.is_directory_search:
            print(selection.path, file=self.stdout or sys.stdout)
            return 0
        
        return open_in_editor(selection.path, editor=self.config.editor, runner=self.runner)
    
    def run(self, options: SearchOptions, preview: bool = False) -> int:
        """
        Perform one complete selection cycle.
        
        Args:
            options: Search options with resolved roots
            preview: Whether to show the picker's preview pane
            
        Returns:
            Process exit status for the run
            
        Raises:
            BackendUnavailable: If no enumeration backend is installed
            EnumerationError: If the backend fails
            PickError: If the picker fails
            EditorError: If the editor cannot be started
        """
        logger.debug(f"Searching {options}")
        candidates = self.searcher.search(options)
        if not candidates.strip():
            logger.debug("No candidates found")
            return 0
        
        selection = pick(
            candidates,
            self.picker_args(options, preview),
            runner=self.runner,
            picker=self.config.picker,
        )
        return self.dispatch(options, selection)
