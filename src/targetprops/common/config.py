'''Global configuration system supporting JSON5 files and command-line overrides'''

import argparse
import logging
from pathlib import Path
from typing import Any

import json5

logger = logging.getLogger(__name__)

UNKNOWN_FEATURE_POLICIES = ('error', 'ignore')


class Config:
    '''Global configuration singleton'''

    _instance = None
    _initialized = False

    # Default configuration values
    _defaults = {
        'unknown_features': 'error',
        'log_level': 'WARNING',
    }

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._config = self._defaults.copy()
            self._cli_overrides = {}
            self._initialized = True

    def reset(self):
        '''Drop file values and CLI overrides, back to defaults'''
        self._config = self._defaults.copy()
        self._cli_overrides = {}

    def load_file(self, filepath: str | Path) -> bool:
        '''Load configuration from JSON5 file'''
        filepath = Path(filepath)
        if not filepath.exists():
            return False

        try:
            with open(filepath, 'r', encoding = 'utf-8') as f:
                data = json5.loads(f.read())

        except (OSError, ValueError) as e:
            logger.warning('Failed to load config from %s: %s', filepath, e)
            return False

        if not isinstance(data, dict):
            logger.warning('Ignoring config %s: top level is not an object', filepath)
            return False

        self._config.update(data)
        logger.debug('Loaded config from %s', filepath)
        return True

    def parse_args(self, args: list[str] = None):
        '''Parse command-line arguments and override config'''
        parser = argparse.ArgumentParser(
            description = 'targetprops configuration',
            add_help = False
        )

        parser.add_argument(
            '--config',
            type = str,
            help = 'Path to config file'
        )

        parser.add_argument(
            '--unknown-features',
            type = str,
            choices = UNKNOWN_FEATURE_POLICIES,
            help = 'What to do with feature names missing from the vocabulary'
        )

        parser.add_argument(
            '--log-level',
            type = str,
            help = 'Logging level name'
        )

        # Parse known args, ignore unknown
        parsed, _ = parser.parse_known_args(args)

        if parsed.config:
            self.load_file(parsed.config)

        if parsed.unknown_features:
            self._cli_overrides['unknown_features'] = parsed.unknown_features

        if parsed.log_level:
            self._cli_overrides['log_level'] = parsed.log_level.upper()

    def get(self, key: str, default: Any = None) -> Any:
        '''Get configuration value'''
        # CLI overrides have highest priority
        if key in self._cli_overrides:
            return self._cli_overrides[key]

        if key in self._config:
            return self._config[key]

        return default

    def set(self, key: str, value: Any):
        '''Set configuration value at runtime'''
        self._config[key] = value

    @property
    def unknown_features(self) -> str:
        '''Policy for feature names missing from a vocabulary'''
        policy = str(self.get('unknown_features')).lower()
        if policy not in UNKNOWN_FEATURE_POLICIES:
            raise ValueError(f'unknown_features must be one of {UNKNOWN_FEATURE_POLICIES}, got {policy!r}')
        return policy

    @property
    def log_level(self) -> int:
        '''Numeric logging level'''
        level = logging.getLevelName(str(self.get('log_level')).upper())
        return level if isinstance(level, int) else logging.WARNING


# Global config instance
_config = Config()


def get_config() -> Config:
    '''Get global config instance'''
    return _config


def unknown_feature_policy() -> str:
    '''Get the unknown feature policy (error/ignore)'''
    return _config.unknown_features


def init_config(args: list[str] = None):
    '''Initialize configuration system'''
    if args is not None:
        _config.parse_args(args)
