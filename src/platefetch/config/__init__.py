"""Configuration — package defaults merged with YAML files and environment."""

from platefetch.config.hierarchy import load_config_hierarchy

__all__ = ["load_config_hierarchy"]
