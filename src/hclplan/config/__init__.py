"""Configuration module: packaged defaults, project override and explicit config file."""

from pathlib import Path
from typing import Dict, Any, Optional
import yaml
from pydantic import ValidationError
from ..provider.hcl_provider import (
    HCLProvider,
    ParserFactory,
    PlanJSONProvider,
    ProjectConfig,
    new_hcl_provider,
)
from ..utils.errors import ConfigError
from ..utils.logging import get_logger
from .paths import get_defaults_path, get_project_config_path

logger = get_logger("config")


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}")
    except OSError as e:
        raise ConfigError(f"Error loading config file {config_path}: {e}")

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Config file must contain a dictionary: {config_path}")
    return config


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Deep merge override into base (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration: defaults, then project config, then config_path.
    
    Args:
        config_path: Optional path to a config YAML file
        
    Returns:
        Merged configuration dictionary
        
    Raises:
        ConfigError: If a config file is missing or invalid
    """
    config = _read_yaml(get_defaults_path())
    
    project_config_path = get_project_config_path()
    if project_config_path:
        _deep_merge(config, _read_yaml(project_config_path))
        logger.info(f"Loaded project config from {project_config_path}")
    
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        _deep_merge(config, _read_yaml(path))
        logger.info(f"Loaded configuration from {config_path}")
    
    return config


def load_project_config(config: Optional[Dict[str, Any]] = None) -> ProjectConfig:
    """
    Return the validated project section of the configuration.
    
    Raises:
        ConfigError: If the project section is invalid
    """
    if config is None:
        config = load_config()
    
    project = config.get("project") or {}
    if not isinstance(project, dict):
        raise ConfigError("project is not a dict")
    
    try:
        return ProjectConfig(**project)
    except ValidationError as e:
        raise ConfigError(f"Invalid project config: {e}")


def build_hcl_provider(parser_factory: ParserFactory, provider: PlanJSONProvider,
                       config_path: Optional[str] = None) -> HCLProvider:
    """
    Create an HCLProvider for the configured project.
    
    The project section (path, plan flags, var files, vars) comes from
    load_config(config_path).
    
    Raises:
        ConfigError: If the configuration is invalid
        PlanFlagsError: If the configured plan flags cannot be parsed
    """
    project = load_project_config(load_config(config_path))
    return new_hcl_provider(project, parser_factory, provider)


def get_log_level(config: Dict[str, Any]) -> str:
    """Return the configured log level name."""
    return str((config.get("logging") or {}).get("level", "INFO")).upper()


__all__ = ["load_config", "load_project_config", "build_hcl_provider", "get_log_level"]
