"""
Filesystem enumeration backends for vimi.

Two backends produce the candidate list: ``fd``, which is fast and knows
about hidden files and symlinks, and POSIX ``find``, which is always
available. The backend is chosen once per run by probing the PATH. Each
backend translates SearchOptions into its own argument convention and
returns the raw newline-delimited output unchanged.
"""

import shutil
import logging
import subprocess
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from ..errors import BackendUnavailable, EnumerationError
from ..models.config import EnumeratorConfig
from ..models.search_options import SearchOptions


logger = logging.getLogger(__name__)

# Explicit match-all pattern. fd would otherwise be unable to tell a
# pattern apart from the --search-path arguments.
FD_MATCH_ALL = "."


class Searcher(ABC):
    """
    Base class for enumeration backends.
    
    Subclasses only describe their argument convention; execution and error
    capture are shared. Output is decoded with ``surrogateescape`` so file
    names that are not valid in the locale encoding pass through unchanged.
    """
    
    name = ""
    
    def __init__(self, executable: Optional[str] = None, exclude_dir: str = ".git",
                 runner: Callable[..., subprocess.CompletedProcess] = subprocess.run):
        """
        Initialize the backend.
        
        Args:
            executable: Executable to run (defaults to the backend name)
            exclude_dir: Version-control directory name to exclude
            runner: Callable with the ``subprocess.run`` signature
        """
        self.executable = executable or self.name
        self.exclude_dir = exclude_dir
        self.runner = runner
    
    @abstractmethod
    def build_args(self, options: SearchOptions) -> List[str]:
        """Translate options into this backend's arguments (without the executable)."""
    
    def build_command(self, options: SearchOptions) -> List[str]:
        return [self.executable] + self.build_args(options)
    
    def search(self, options: SearchOptions) -> str:
        """
        Run the backend and return its output.
        
        Args:
            options: Normalized search options
            
        Returns:
            Newline-delimited candidate list, possibly empty
            
        Raises:
            BackendUnavailable: If the executable disappeared since probing
            EnumerationError: If the backend exits with a non-zero status
        """
        command = self.build_command(options)
        logger.debug(f"Running {self.name}: {command}")
        
        try:
            result = self.runner(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="surrogateescape",
            )
        except FileNotFoundError as e:
            raise BackendUnavailable(f"{self.name} could not be started: {e}") from e
        
        if result.returncode != 0:
            raise EnumerationError(self.name, result.returncode, result.stdout or "")
        
        output = result.stdout or ""
        logger.debug(f"{self.name} produced {len(output.splitlines())} candidate(s)")
        return output
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(executable={self.executable!r})"


class FdSearcher(Searcher):
    """Enumerates with ``fd``, including hidden entries and following symlinks."""
    
    name = "fd"
    
    def build_args(self, options: SearchOptions) -> List[str]:
        args = [
            "--type", options.item_type.value,
            "--hidden",
            "--follow",
            "--exclude", self.exclude_dir,
        ]
        if options.depth > 0:
            args.extend(["--max-depth", str(options.depth)])
        for root in options.roots:
            args.extend(["--search-path", root])
        args.append(FD_MATCH_ALL)
        return args


class FindSearcher(Searcher):
    """Enumerates with POSIX ``find``; the roots themselves are excluded."""
    
    name = "find"
    
    def build_args(self, options: SearchOptions) -> List[str]:
        args = list(options.roots)
        if options.depth > 0:
            args.extend(["-maxdepth", str(options.depth)])
        args.extend(["-mindepth", "1"])
        args.extend(["-not", "-path", f"*/{self.exclude_dir}/*"])
        args.extend(["-type", options.item_type.value])
        args.append("-print")
        return args


def choose_searcher(
    which: Callable[[str], Optional[str]] = shutil.which,
    config: Optional[EnumeratorConfig] = None,
    runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> Searcher:
    """
    Pick the enumeration backend for this run.
    
    Args:
        which: Executable lookup, ``shutil.which`` by default
        config: Enumerator settings (defaults to EnumeratorConfig())
        runner: Process runner handed to the chosen backend
        
    Returns:
        FdSearcher if the fast finder is available, else FindSearcher
        
    Raises:
        BackendUnavailable: If neither executable is on the PATH
    """
    config = config or EnumeratorConfig()
    
    if which(config.fast):
        logger.debug(f"Using fast enumerator: {config.fast}")
        return FdSearcher(executable=config.fast, exclude_dir=config.exclude_dir, runner=runner)
    
    if which(config.posix):
        logger.debug(f"{config.fast} not found, falling back to {config.posix}")
        return FindSearcher(executable=config.posix, exclude_dir=config.exclude_dir, runner=runner)
    
    raise BackendUnavailable(f"neither {config.fast} nor {config.posix} is installed")
