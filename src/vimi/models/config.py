"""
Configuration data models for vimi.

This module defines the settings that shape a run: which environment
variables supply default roots, which executables act as enumerator, picker
and editor, and how the preview pane is rendered. Settings come from
built-in defaults and environment overrides only; nothing is read from disk.
"""

from typing import Dict, List, Any
from pydantic import BaseModel, Field, field_validator


DEFAULT_ROOT_ENV_VARS = ["PROJECT_DIR", "WORK_DIR", "ASSET_DIR"]


def _validate_command_name(v: str) -> str:
    """Commands must be a single token because they are exec'd without a shell."""
    if not v or not v.strip():
        raise ValueError("Command name cannot be empty")
    v = v.strip()
    if any(ch.isspace() for ch in v):
        raise ValueError(f"Command name must not contain whitespace: {v!r}")
    return v


class EnumeratorConfig(BaseModel):
    """
    Configuration for the enumeration backends.
    
    Attributes:
        fast: Executable name of the preferred recursive finder
        posix: Executable name of the POSIX fallback walker
        exclude_dir: Version-control directory name excluded from results
    """
    
    fast: str = Field("fd", description="Preferred recursive finder")
    posix: str = Field("find", description="POSIX fallback directory walker")
    exclude_dir: str = Field(".git", description="Directory name excluded from results")
    
    @field_validator('fast', 'posix', 'exclude_dir')
    @classmethod
    def validate_names(cls, v: str) -> str:
        return _validate_command_name(v)


class PreviewConfig(BaseModel):
    """
    Configuration for the picker's preview pane.
    
    Attributes:
        window: fzf ``--preview-window`` layout
        highlighter: Syntax-highlighting viewer used for file previews
        line_range: Number of leading lines the highlighter renders
        directory_lister: Command used to list directory contents
    """
    
    window: str = Field("right:45%", description="Preview window layout")
    highlighter: str = Field("bat", description="Syntax-highlighting viewer for files")
    line_range: int = Field(300, gt=0, description="Lines rendered in file previews")
    directory_lister: str = Field("ls -la", description="Command listing directory contents")
    
    @field_validator('highlighter')
    @classmethod
    def validate_highlighter(cls, v: str) -> str:
        return _validate_command_name(v)
    
    def file_preview_command(self) -> str:
        """Shell command fzf runs for a highlighted file preview."""
        return f"{self.highlighter} --color=always --style=header,grid --line-range :{self.line_range} {{}}"
    
    def directory_preview_command(self) -> str:
        """Shell command fzf runs to list a directory."""
        return f"{self.directory_lister} {{}}"


class VimiConfig(BaseModel):
    """
    Main configuration class for vimi.
    
    Attributes:
        root_env_vars: Environment variables consulted, in order, when no
            positional roots are given
        editor: Editor executable launched on the selected file
        picker: Interactive fuzzy picker executable
        enumerator: Enumeration backend settings
        preview: Preview pane settings
    """
    
    root_env_vars: List[str] = Field(
        default_factory=lambda: list(DEFAULT_ROOT_ENV_VARS),
        description="Environment variables supplying default roots"
    )
    editor: str = Field("nvim", description="Editor executable")
    picker: str = Field("fzf", description="Fuzzy picker executable")
    enumerator: EnumeratorConfig = Field(default_factory=EnumeratorConfig, description="Enumerator settings")
    preview: PreviewConfig = Field(default_factory=PreviewConfig, description="Preview pane settings")
    
    @field_validator('editor', 'picker')
    @classmethod
    def validate_commands(cls, v: str) -> str:
        return _validate_command_name(v)
    
    @field_validator('root_env_vars')
    @classmethod
    def validate_root_env_vars(cls, v: List[str]) -> List[str]:
        """Drop blanks and duplicates while keeping priority order."""
        seen = []
        for name in v:
            name = name.strip()
            if name and name not in seen:
                seen.append(name)
        return seen
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VimiConfig':
        """Create a VimiConfig instance from a dictionary."""
        return cls.model_validate(data)
    
    def __str__(self) -> str:
        return (
            f"VimiConfig(editor={self.editor}, picker={self.picker}, "
            f"enumerators={self.enumerator.fast}/{self.enumerator.posix})"
        )
