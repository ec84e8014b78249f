"""
External tool adapters for vimi.

This module wraps the three child processes a run chains together: the
filesystem enumerator, the interactive picker and the editor.
"""
