"""
Search option data models for vimi.

This module defines the normalized options handed to an enumeration backend,
the selection returned by the picker, and the resolved plan of a single run.
"""

from typing import Dict, List, Optional, Any
from enum import Enum
from pydantic import BaseModel, Field, field_validator


class ItemType(Enum):
    """Kind of filesystem entry to enumerate.

    The values are the type letters understood by both ``fd --type`` and
    ``find -type``.
    """
    FILE = "f"
    DIRECTORY = "d"


class SearchOptions(BaseModel):
    """
    Normalized search request handed to an enumeration backend.
    
    Attributes:
        item_type: Whether to enumerate files or directories
        depth: Maximum recursion depth, 0 means unlimited
        roots: Ordered search roots, passed to the backend verbatim
    """
    
    item_type: ItemType = Field(ItemType.FILE, description="Kind of entries to enumerate")
    depth: int = Field(0, ge=0, description="Maximum recursion depth (0 = unlimited)")
    roots: List[str] = Field(..., min_length=1, description="Ordered search roots")
    
    @field_validator('item_type', mode='before')
    @classmethod
    def validate_item_type(cls, v) -> ItemType:
        """Accept the type letter or the enum name as well as the enum."""
        if isinstance(v, str):
            try:
                return ItemType(v)
            except ValueError:
                try:
                    return ItemType[v.upper()]
                except KeyError:
                    raise ValueError(f"Invalid item type: {v}")
        return v
    
    @field_validator('roots')
    @classmethod
    def validate_roots(cls, v: List[str]) -> List[str]:
        """Reject blank roots. Existence is left to the backend to report."""
        for root in v:
            if not root or not root.strip():
                raise ValueError("Search roots cannot be blank")
        return v
    
    @property
    def is_directory_search(self) -> bool:
        return self.item_type is ItemType.DIRECTORY
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert the options to a dictionary representation."""
        data = self.model_dump()
        data['item_type'] = self.item_type.name.lower()
        return data
    
    def __str__(self) -> str:
        depth = str(self.depth) if self.depth else "unlimited"
        return f"{self.item_type.name.lower()}s under {', '.join(self.roots)} (depth: {depth})"


class Selection(BaseModel):
    """
    Outcome of one picker session.

    A selection without a path means the user cancelled or nothing matched.
    """
    
    path: Optional[str] = Field(None, description="Selected path, or None when nothing was chosen")
    
    @field_validator('path')
    @classmethod
    def validate_path(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None
    
    def is_empty(self) -> bool:
        return self.path is None
    
    @classmethod
    def empty(cls) -> 'Selection':
        return cls(path=None)


class RunPlan(BaseModel):
    """
    Fully resolved description of what a run would execute.
    
    Attributes:
        options: Search options after root resolution
        backend: Name of the chosen enumeration backend
        enumerator_command: Complete enumerator argv
        picker_command: Complete picker argv, including preview arguments
        editor_command: Editor argv without the selected path
    """
    
    options: SearchOptions
    backend: str = Field(..., min_length=1, description="Chosen enumeration backend")
    enumerator_command: List[str] = Field(..., min_length=1, description="Enumerator argv")
    picker_command: List[str] = Field(..., min_length=1, description="Picker argv")
    editor_command: List[str] = Field(default_factory=list, description="Editor argv (file mode only)")
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary suitable for YAML output."""
        return {
            'options': self.options.to_dict(),
            'backend': self.backend,
            'enumerator_command': list(self.enumerator_command),
            'picker_command': list(self.picker_command),
            'editor_command': list(self.editor_command),
        }
