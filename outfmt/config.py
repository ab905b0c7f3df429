"""
Formatter Configuration for outfmt
===================================
Load the configuration layer of FormatterOptions from YAML files, e.g.:

    default-format: table
    default-fields: name,status
    field-labels:
      name: Name
      status: State
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

# Configure module logger
logger = logging.getLogger(__name__)

CONFIG_DIR = ".outfmt"
CONFIG_FILE = "config.yaml"


def config_search_paths(workspace: Optional[Path] = None) -> List[Path]:
    """Candidate configuration files, most specific first"""
    workspace = workspace or Path.cwd()
    return [
        workspace / CONFIG_DIR / CONFIG_FILE,
        Path.home() / CONFIG_DIR / CONFIG_FILE,
    ]


def load_configuration(path: Path) -> Dict[str, Any]:
    """
    Load formatter configuration from a YAML file.

    Args:
        path: Configuration file

    Returns:
        Configuration mapping; empty if the file does not exist

    Raises:
        ValueError: If the document is not a mapping
        yaml.YAMLError: If the file is not valid YAML
    """
    if not path.exists():
        return {}

    with open(path, encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {path} must be a mapping")

    logger.debug(f"Loaded formatter configuration from {path}")
    return data


def find_configuration(workspace: Optional[Path] = None) -> Dict[str, Any]:
    """Load the first configuration file found on the search path"""
    for path in config_search_paths(workspace):
        if path.exists():
            return load_configuration(path)
    return {}


__all__ = [
    'config_search_paths',
    'load_configuration',
    'find_configuration',
]
