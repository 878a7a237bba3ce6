"""Configuration validation for the informed search toolkit."""

import logging
from typing import Any

from omegaconf import DictConfig

logger = logging.getLogger(__name__)

SOLVER_SECTIONS = ('rbfs', 'astar')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_search_config(config.get('search', {}))
        validate_logging_config(config.get('logging', {}))

        logger.info("Configuration validation passed")

    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}")


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section.

    Args:
        search_config: Search configuration section
    """
    if not search_config:
        return

    for solver_name in SOLVER_SECTIONS:
        solver_config = search_config.get(solver_name, {})
        if not solver_config:
            continue

        max_nodes = solver_config.get('max_nodes_expanded', None)
        if max_nodes is not None and (
                isinstance(max_nodes, bool) or not isinstance(max_nodes, int) or max_nodes <= 0):
            raise ConfigValidationError(
                f"{solver_name}.max_nodes_expanded must be positive integer or null, got {max_nodes}"
            )

        max_time = solver_config.get('max_computation_time', None)
        if max_time is not None and (
                isinstance(max_time, bool) or not isinstance(max_time, (int, float)) or max_time <= 0):
            raise ConfigValidationError(
                f"{solver_name}.max_computation_time must be positive number or null, got {max_time}"
            )

    reopen = search_config.get('astar', {}).get('reopen_closed', True)
    if not isinstance(reopen, bool):
        raise ConfigValidationError(f"astar.reopen_closed must be boolean, got {reopen}")


def validate_logging_config(logging_config: DictConfig) -> None:
    """Validate logging configuration section.

    Args:
        logging_config: Logging configuration section
    """
    if not logging_config:
        return

    level: Any = logging_config.get('level', 'INFO')
    if str(level).upper() not in LOG_LEVELS:
        raise ConfigValidationError(
            f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level}"
        )
