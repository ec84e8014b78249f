"""
Exception hierarchy for vimi.

Every fatal condition of a run derives from VimiError so the command-line
entry point can report it uniformly and exit with status 1.
"""

from typing import Optional


class VimiError(Exception):
    """Base class for all fatal vimi errors."""
    pass


class BackendUnavailable(VimiError):
    """Raised when no enumeration backend executable can be found."""
    pass


class EnumerationError(VimiError):
    """
    Raised when an enumeration backend exits with a non-zero status.
    
    Attributes:
        backend: Name of the backend that failed
        returncode: Exit status of the backend process
        output: Combined stdout/stderr of the backend, verbatim
    """
    
    def __init__(self, backend: str, returncode: int, output: str):
        self.backend = backend
        self.returncode = returncode
        self.output = output
        super().__init__(f"{backend} error: exit status {returncode}\n{output}")


class PickError(VimiError):
    """
    Raised when the picker fails for a reason other than cancellation.
    
    Attributes:
        returncode: Exit status of the picker, or None if it never started
    """
    
    def __init__(self, message: str, returncode: Optional[int] = None):
        self.returncode = returncode
        super().__init__(message)


class EditorError(VimiError):
    """Raised when the editor process cannot be started."""
    pass


class ConfigurationError(VimiError):
    """Raised when configuration overrides fail validation."""
    pass
