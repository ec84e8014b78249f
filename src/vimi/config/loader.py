"""
Environment-driven configuration loader for vimi.

This module merges the built-in defaults with the ``VIMI_*`` environment
overrides, validates the result, and reports non-fatal problems as warnings.
No configuration file is read or written.
"""

import os
import shutil
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Any, List, Mapping, Optional

from pydantic import ValidationError

from ..errors import ConfigurationError
from ..models.config import VimiConfig


logger = logging.getLogger(__name__)


@dataclass
class ConfigLoadResult:
    """
    Result of a configuration load.
    
    Attributes:
        config: The validated configuration
        warnings: List of non-fatal warnings
        overrides: Environment variables that changed a default, by name
    """
    config: VimiConfig
    warnings: List[str] = field(default_factory=list)
    overrides: Dict[str, str] = field(default_factory=dict)


class ConfigLoader:
    """
    Builds a VimiConfig from defaults and environment overrides.
    
    The environment mapping and the executable lookup are injectable so that
    callers and tests never need to touch process-wide state.
    """
    
    ENV_OVERRIDES = {
        'VIMI_EDITOR': 'editor',
        'VIMI_PICKER': 'picker',
    }
    
    def __init__(self, which: Callable[[str], Optional[str]] = shutil.which):
        """
        Initialize the configuration loader.
        
        Args:
            which: Executable lookup used for availability warnings
        """
        self.which = which
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
    
    def load_config(self, environ: Optional[Mapping[str, str]] = None) -> ConfigLoadResult:
        """
        Load the effective configuration.
        
        Args:
            environ: Environment mapping to read overrides from. Defaults to
                ``os.environ``.
            
        Returns:
            ConfigLoadResult containing the configuration and metadata
            
        Raises:
            ConfigurationError: If an override is invalid
        """
        if environ is None:
            environ = os.environ
        
        config_data = self._get_default_config()
        overrides = self._collect_overrides(environ)
        for env_name, value in overrides.items():
            config_data[self.ENV_OVERRIDES[env_name]] = value
        
        try:
            config = VimiConfig.from_dict(config_data)
        except ValidationError as e:
            sources = ', '.join(sorted(overrides)) or 'defaults'
            raise ConfigurationError(f"Invalid configuration from {sources}: {e}") from e
        
        warnings = self._get_warnings(config)
        for warning in warnings:
            self.logger.warning(warning)
        self.logger.debug(f"Configuration loaded: {config}")
        
        return ConfigLoadResult(config=config, warnings=warnings, overrides=overrides)
    
    def _collect_overrides(self, environ: Mapping[str, str]) -> Dict[str, str]:
        """Return the override variables that are present in the environment."""
        overrides = {}
        for env_name in self.ENV_OVERRIDES:
            if env_name in environ:
                overrides[env_name] = environ[env_name]
        return overrides
    
    def _get_default_config(self) -> Dict[str, Any]:
        """
        Get the built-in default configuration.
        
        Returns:
            Default configuration dictionary
        """
        return VimiConfig().to_dict()
    
    def _get_warnings(self, config: VimiConfig) -> List[str]:
        """
        Get warnings about tools that are not on the PATH.
        
        Missing enumerators are not reported here; the run fails with a
        dedicated error if neither is present.
        """
        warnings = []
        
        if self.which(config.picker) is None:
            warnings.append(f"Picker '{config.picker}' not found on PATH")
        
        if self.which(config.editor) is None:
            warnings.append(f"Editor '{config.editor}' not found on PATH")
        
        return warnings


def load_config(environ: Optional[Mapping[str, str]] = None) -> ConfigLoadResult:
    """
    Convenience function to load configuration.
    
    Args:
        environ: Environment mapping (defaults to ``os.environ``)
        
    Returns:
        ConfigLoadResult containing the configuration
        
    Raises:
        ConfigurationError: If configuration is invalid
    """
    loader = ConfigLoader()
    return loader.load_config(environ)
