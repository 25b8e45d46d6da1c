"""YAML configuration loading and validation."""

import yaml
from pathlib import Path
from typing import Union
from .schema import SplitConfig

class ConfigLoadError(Exception):
    """Exception raised when configuration loading or validation fails."""
    pass

def _build_config(data, source: str) -> SplitConfig:
    if data is None:
        return SplitConfig()
        
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Config in {source} must contain a YAML mapping, got {type(data)}")
        
    try:
        return SplitConfig.model_validate(data)
    except Exception as e:
        raise ConfigLoadError(f"Config validation failed: {e}")

def load_config(path: Union[str, Path]) -> SplitConfig:
    """
    Load and validate a splitter config from a YAML file.
    
    Args:
        path: Path to YAML config file
        
    Returns:
        SplitConfig: Validated config object (defaults for an empty file)
        
    Raises:
        ConfigLoadError: If file cannot be read or config is invalid
    """
    path = Path(path)
    
    if not path.exists():
        raise ConfigLoadError(f"Config file not found: {path}")
        
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise ConfigLoadError(f"Cannot read config file {path}: {e}")
        
    return _build_config(data, str(path))

def load_config_from_string(yaml_content: str) -> SplitConfig:
    """
    Load and validate a splitter config from a YAML string.
    
    Args:
        yaml_content: YAML content as string
        
    Returns:
        SplitConfig: Validated config object
        
    Raises:
        ConfigLoadError: If YAML is invalid or config validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML content: {e}")
        
    return _build_config(data, "string")
