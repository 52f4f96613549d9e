#!/usr/bin/env python3
"""
Configuration loader for typo distance scoring.

Provides configuration management using YAML files.
Handles merging of common settings with scorer-specific settings.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List


# Sections that aren't scorers
SPECIAL_SECTIONS = {'common', 'output_formats', 'logging'}


class ConfigLoader:
    """Handles loading and processing of YAML configuration files."""

    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        self._config_cache: Optional[Dict[str, Any]] = None

    def load_config(self) -> Dict[str, Any]:
        """
        Load YAML configuration file.

        Returns:
            Full configuration dictionary

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            yaml.YAMLError: If YAML parsing fails
        """
        if self._config_cache is not None:
            return self._config_cache

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error parsing YAML configuration: {e}")

        if config is None:
            config = {}

        self._config_cache = config
        return config

    def get_scorer_config(self, scorer_name: str = "typo_distance") -> Dict[str, Any]:
        """
        Get configuration for a scorer with common settings merged.

        Args:
            scorer_name: Name of the scorer section

        Returns:
            Merged configuration dictionary (scorer settings take precedence)

        Raises:
            ValueError: If scorer not found in configuration
        """
        full_config = self.load_config()

        if scorer_name not in full_config:
            raise ValueError(
                f"Scorer '{scorer_name}' not found in configuration. "
                f"Available scorers: {self.get_available_scorers()}"
            )

        common_config = full_config.get('common') or {}
        scorer_config = dict(full_config[scorer_name] or {})

        return {**common_config, **scorer_config}

    def get_output_format_config(self, format_name: str) -> Dict[str, Any]:
        """
        Get output format configuration.

        Args:
            format_name: Name of output format (csv, detailed, score_only)
        """
        full_config = self.load_config()
        output_formats = full_config.get('output_formats') or {}

        return output_formats.get(format_name) or {}

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration (level, format)."""
        full_config = self.load_config()
        return full_config.get('logging') or {}

    def get_available_scorers(self) -> List[str]:
        """Get list of scorer section names found in configuration."""
        full_config = self.load_config()
        return [k for k in full_config.keys() if k not in SPECIAL_SECTIONS]

    def validate_scorer_config(self, scorer_name: str = "typo_distance") -> List[str]:
        """
        Validate a scorer's configuration and return any issues found.

        Returns:
            List of validation error messages (empty if valid)
        """
        try:
            config = self.get_scorer_config(scorer_name)
        except (ValueError, FileNotFoundError, yaml.YAMLError) as e:
            return [f"Configuration error: {e}"]

        issues = []

        for section in ['description', 'method']:
            if section not in config:
                issues.append(f"Missing required section: {section}")

        batch_config = config.get('batch') or {}
        for key in ['source_column', 'target_column', 'output_column']:
            if batch_config and key not in batch_config:
                issues.append(f"Missing {key} in batch configuration")

        scoring_options = config.get('scoring_options') or {}
        for option, value in scoring_options.items():
            if not isinstance(value, bool):
                issues.append(f"Scoring option '{option}' should be true or false, got {value!r}")

        return issues


# Global configuration loader instance
_config_loader: Optional[ConfigLoader] = None

def get_config_loader(config_path: str = "config.yaml") -> ConfigLoader:
    """
    Get global configuration loader instance (singleton pattern).

    Args:
        config_path: Path to configuration file

    Returns:
        ConfigLoader instance
    """
    global _config_loader

    if _config_loader is None or _config_loader.config_path != Path(config_path):
        _config_loader = ConfigLoader(config_path)

    return _config_loader

def load_scorer_config(scorer_name: str = "typo_distance",
                       config_path: str = "config.yaml") -> Dict[str, Any]:
    """
    Convenience function to load configuration for a scorer.

    Args:
        scorer_name: Name of the scorer
        config_path: Path to configuration file

    Returns:
        Scorer configuration dictionary
    """
    loader = get_config_loader(config_path)
    return loader.get_scorer_config(scorer_name)
