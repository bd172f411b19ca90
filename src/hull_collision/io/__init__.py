# MIT License (see LICENSE)
"""
Input/Output utilities.

This subpackage provides:
    - JSON configuration: GjkConfig parameters from/to JSON files.
    - Body loading: ConvexBody definitions from JSON.

Typical usage:
    from hull_collision.io import load_config, load_bodies

    config = load_config("query.json")
    bodies = load_bodies("query.json")
"""
from .json_io import (
    load_config,
    load_config_raw,
    save_config,
    config_from_json,
    config_to_json,
    vector_from_json,
    body_from_json,
    body_to_json,
    bodies_to_json,
    load_bodies,
)

__all__ = [
    # Loading
    "load_config",
    "load_config_raw",
    "load_bodies",
    # Saving
    "save_config",
    # Serialization
    "config_from_json",
    "config_to_json",
    "vector_from_json",
    "body_from_json",
    "body_to_json",
    "bodies_to_json",
]
