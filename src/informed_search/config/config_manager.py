"""Hydra-backed configuration for the search toolkit.

The default configuration ships inside the package (``informed_search/conf``),
so it is found both from a source checkout and from an installed wheel. The
most recently loaded configuration becomes the global configuration that
solvers fall back to when they are created without a ``SearchConfig``.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from omegaconf import DictConfig, OmegaConf

from informed_search.search.base import SearchConfig
from .validators import validate_config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "conf"

_global_config: Optional[DictConfig] = None


def _search_config(cfg: DictConfig, solver_name: str) -> SearchConfig:
    return SearchConfig.from_config(OmegaConf.select(cfg, f"search.{solver_name}"))


class ConfigManager:
    """Composes configurations from one Hydra config directory."""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_dir: Directory holding ``<config_name>.yaml``. Defaults to
                the configuration bundled with the package.
        """
        self.config_dir = Path(config_dir if config_dir is not None else DEFAULT_CONFIG_DIR).resolve()
        self.config: Optional[DictConfig] = None

        if not self.config_dir.is_dir():
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

    def load_config(self,
                    config_name: str = "config",
                    overrides: Optional[List[str]] = None,
                    validate: bool = True) -> DictConfig:
        """Compose a configuration and make it the global one.

        Args:
            config_name: Name of the main config file (without .yaml)
            overrides: Hydra overrides, e.g. ``search.rbfs.max_nodes_expanded=100``
            validate: Whether to run ``validate_config`` on the result

        Raises:
            ConfigValidationError: If validation is requested and fails
        """
        global _global_config

        GlobalHydra.instance().clear()
        try:
            with initialize_config_dir(config_dir=str(self.config_dir), version_base=None):
                cfg = compose(config_name=config_name, overrides=list(overrides or []))
            if validate:
                validate_config(cfg)
        except Exception as e:
            logger.error(f"Failed to load configuration {config_name} from {self.config_dir}: {e}")
            raise

        self.config = _global_config = cfg
        logger.info(f"Loaded configuration {config_name}"
                    + (f" with overrides {overrides}" if overrides else ""))
        return cfg

    def _loaded(self) -> DictConfig:
        if self.config is None:
            raise RuntimeError("No configuration loaded. Call load_config() first.")
        return self.config

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key such as ``search.astar.reopen_closed``."""
        return OmegaConf.select(self._loaded(), key, default=default)

    def get_search_config(self, solver_name: str) -> SearchConfig:
        """Build the ``SearchConfig`` of the ``search.<solver_name>`` section."""
        return _search_config(self._loaded(), solver_name)


def load_config(config_name: str = "config",
                overrides: Optional[List[str]] = None,
                config_dir: Optional[Union[str, Path]] = None,
                validate: bool = True) -> DictConfig:
    """Load a configuration with a fresh ``ConfigManager``; see ``ConfigManager.load_config``."""
    return ConfigManager(config_dir).load_config(config_name, overrides, validate)


def get_config() -> Optional[DictConfig]:
    """Return the global configuration, or None if none was loaded."""
    return _global_config


def reset_config() -> None:
    """Forget the global configuration."""
    global _global_config
    _global_config = None


def get_parameter(key: str, default: Any = None) -> Any:
    """Look up a dotted key in the global configuration."""
    if _global_config is None:
        logger.warning("No global configuration loaded")
        return default
    return OmegaConf.select(_global_config, key, default=default)


def get_search_config(solver_name: str) -> SearchConfig:
    """Solver settings from the global configuration; unlimited defaults when none is loaded."""
    if _global_config is None:
        return SearchConfig()
    return _search_config(_global_config, solver_name)
