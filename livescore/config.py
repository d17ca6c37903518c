"""
Configuration management.

Loads settings from environment variables. Embedding apps can extend
this config dict with their own keys.
"""

import os

config = {
    # Extra directory searched for fixture scripts (built-ins always available)
    "LIVESCORE_FIXTURES_DIR": os.environ.get("LIVESCORE_FIXTURES_DIR", ""),
    "LIVESCORE_LOG_LEVEL": os.environ.get("LIVESCORE_LOG_LEVEL", "WARNING"),
}


def register_config_keys(keys: dict):
    """
    Register additional config keys from an embedding app.

    Args:
        keys: Dict of key -> value pairs to add to the global config.
              Existing keys are NOT overwritten.
    """
    for k, v in keys.items():
        if k not in config:
            config[k] = v
