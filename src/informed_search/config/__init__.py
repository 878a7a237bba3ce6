"""Configuration management for the informed search toolkit.

Hydra composes the bundled ``conf/config.yaml`` (or a caller supplied
directory) with command-line style overrides; the result configures the
solvers through ``get_search_config``.
"""

from .config_manager import (
    ConfigManager, load_config, get_config, get_parameter, get_search_config, reset_config
)
from .validators import validate_config, ConfigValidationError

__all__ = [
    'ConfigManager',
    'load_config',
    'get_config',
    'get_parameter',
    'get_search_config',
    'reset_config',
    'validate_config',
    'ConfigValidationError'
]
