"""
Search root resolution for vimi.

Roots come from the positional arguments when any are given, otherwise from
a fixed, ordered list of environment variables, otherwise the current
directory. Roots are not validated here; a missing root surfaces as an
enumeration error downstream.
"""

import os
import logging
from typing import List, Mapping, Optional, Sequence

from .models.config import DEFAULT_ROOT_ENV_VARS


logger = logging.getLogger(__name__)

CURRENT_DIRECTORY = "."


def resolve_roots(
    args: Sequence[str],
    environ: Optional[Mapping[str, str]] = None,
    env_vars: Sequence[str] = DEFAULT_ROOT_ENV_VARS,
) -> List[str]:
    """
    Resolve the ordered, non-empty list of search roots.
    
    Args:
        args: Positional command-line arguments
        environ: Environment mapping (defaults to ``os.environ``). Only read
            when ``args`` is empty.
        env_vars: Environment variable names to consult, in priority order
        
    Returns:
        Non-empty list of root paths
    """
    if args:
        roots = list(args)
        logger.debug(f"Using {len(roots)} root(s) from arguments")
        return roots
    
    if environ is None:
        environ = os.environ
    
    roots = []
    for name in env_vars:
        value = environ.get(name, "")
        if value:
            logger.debug(f"Using root from ${name}: {value}")
            roots.append(value)
    
    if not roots:
        logger.debug("No roots given, falling back to the current directory")
        roots = [CURRENT_DIRECTORY]
    
    return roots
