"""
vimi - Core Package

A small launcher that fuzzy-selects a file or directory under one or more
search roots and opens the selection in an editor.
"""

__version__ = "0.1.0"
__author__ = "vimi contributors"
