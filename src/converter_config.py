#!/usr/bin/env python3
"""
Configuration and logging setup for the temperature converter
Settings come from config.env and the environment

Usage:
    configure_logging(load_config())                 # reads ./config.env
    configure_logging(load_config('/etc/converter.env'))
"""

import os
import sys
import logging
from typing import Dict

from dotenv import load_dotenv

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

DEFAULTS = {
    'LOG_LEVEL': 'INFO',
    'LOG_FILE': '',
}


def load_config(env_file: str = 'config.env') -> Dict[str, str]:
    """Load settings from an env file, letting existing environment variables win

    Args:
        env_file: Path to the env file; a missing file is ignored

    Returns:
        Dict of setting name to value, with defaults filled in
    """
    load_dotenv(env_file)
    return {key: os.getenv(key, default) for key, default in DEFAULTS.items()}


def configure_logging(config: Dict[str, str]) -> None:
    """Configure root logging from loaded settings"""
    log_level = config.get('LOG_LEVEL', DEFAULTS['LOG_LEVEL']).upper()
    level = logging.getLevelName(log_level)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    handlers = [logging.StreamHandler(sys.stdout)]
    log_file = config.get('LOG_FILE')
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
