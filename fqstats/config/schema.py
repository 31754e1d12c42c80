"""
FqStats v0.1.0

Configuration schema for FqStats.

Defines all available configuration parameters with defaults and validation.

Author: FqStats Development Team
License: MIT License - See LICENSE
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..errors import ConfigValidationError


OUTPUT_FORMATS = ['summary', 'json', 'yaml', 'tsv']
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # Statistics
    # ========================================================================
    'statistics': {
        'compute_gc': False,  # GC fraction over all bases
    },
    
    # ========================================================================
    # Output
    # ========================================================================
    'output': {
        'format': 'summary',  # 'summary', 'json', 'yaml', 'tsv'
    },
    
    # ========================================================================
    # Logging
    # ========================================================================
    'logging': {
        'level': 'WARNING',
        'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    },
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from file or return defaults.
    
    Args:
        config_path: Path to YAML config file (None = use defaults)
    
    Returns:
        Configuration dictionary
    
    Raises:
        FileNotFoundError: If config_path is given but does not exist
        ConfigValidationError: If the file is not valid YAML or not a mapping
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    
    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                user_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(
                f"Invalid YAML in config file {config_path}: {e}"
            ) from e
        
        if user_config is None:
            return config
        if not isinstance(user_config, dict):
            raise ConfigValidationError(
                f"Config file {config_path} must contain a mapping, "
                f"got {type(user_config).__name__}"
            )
        
        # Deep merge user config into defaults
        config = _deep_merge(config, user_config)
    
    return config


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.
    
    Args:
        base: Base dictionary
        override: Override dictionary
    
    Returns:
        Merged dictionary
    """
    result = base.copy()
    
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    
    return result


def save_config_template(output_path: Path, compute_gc: bool = False):
    """
    Save a configuration template to file.
    
    Args:
        output_path: Output file path
        compute_gc: Enable GC fraction in the template
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config['statistics']['compute_gc'] = compute_gc
    
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def _section(config: Dict[str, Any], name: str, errors: List[str]) -> Optional[Dict[str, Any]]:
    """Return a config section, recording an error if it is not a mapping."""
    section = config.get(name)
    if not isinstance(section, dict):
        errors.append(f"{name} must be a mapping, got {section!r}")
        return None
    return section


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.
    
    A section that is not a mapping is reported once and its keys are not
    checked further.
    
    Args:
        config: Configuration to validate
    
    Returns:
        List of validation errors (empty if valid)
    """
    errors = []
    
    statistics = _section(config, 'statistics', errors)
    if statistics is not None:
        compute_gc = statistics.get('compute_gc')
        if not isinstance(compute_gc, bool):
            errors.append(f"statistics.compute_gc must be true or false, got {compute_gc!r}")
    
    output = _section(config, 'output', errors)
    if output is not None:
        output_format = output.get('format')
        if output_format not in OUTPUT_FORMATS:
            errors.append(
                f"Invalid output format: {output_format} (choose from {', '.join(OUTPUT_FORMATS)})"
            )
    
    logging_section = _section(config, 'logging', errors)
    if logging_section is not None:
        level = logging_section.get('level')
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            errors.append(f"Invalid logging level: {level}")
        
        log_format = logging_section.get('format')
        if not isinstance(log_format, str):
            errors.append(f"logging.format must be a string, got {log_format!r}")
    
    return errors


def resolve_log_level(config: Dict[str, Any], verbose: bool = False, quiet: bool = False) -> int:
    """
    Pick the logging level from CLI flags, falling back to the config.
    
    Args:
        config: Configuration dictionary
        verbose: --verbose was given
        quiet: --quiet was given
    
    Returns:
        A logging module level constant
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    
    section = config.get('logging')
    if not isinstance(section, dict):
        return logging.WARNING

    level = str(section.get('level', 'WARNING')).upper()
    return getattr(logging, level, logging.WARNING) if level in LOG_LEVELS else logging.WARNING
