"""
Data models for vimi.

This module contains the transient data structures passed between the
root resolver, the enumerator adapter and the selector/dispatcher.
"""

from .search_options import ItemType, SearchOptions, Selection, RunPlan
from .config import VimiConfig, EnumeratorConfig, PreviewConfig

__all__ = [
    'ItemType',
    'SearchOptions',
    'Selection',
    'RunPlan',
    'VimiConfig',
    'EnumeratorConfig',
    'PreviewConfig',
]
