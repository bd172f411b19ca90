# MIT License (see LICENSE)
"""
JSON configuration and body loading.

A single JSON document can carry the query parameters and, optionally, a
list of convex bodies. Both parts are independent: load_config() ignores
"bodies" and load_bodies() ignores the parameters.

JSON Schema Overview:
---------------------
{
  "max_iterations": int,           # GJK cap, default: 50
  "epa_tolerance": float,          # EPA convergence distance, default: 1e-5
  "epa_max_iterations": int,       # EPA cap, default: 128
  "bodies": [                      # Optional
    {
      "vertices": [vec3, ...],     # Required, local-space hull vertices
      "position": vec3,            # Default: [0, 0, 0]
      "rotation": [[r00, r01, r02],
                   [r10, r11, r12],
                   [r20, r21, r22]],  # Default: identity
      "scale": float,              # Default: 1
      "id": int | string           # Optional
    }
  ]
}

where vec3 is either [x, y, z] or {"x": x, "y": y, "z": z}.
"""
from __future__ import annotations
import json
from typing import Any

import numpy as np

from ..config import GjkConfig
from ..constants import EPA_MAX_ITERATIONS, EPA_TOLERANCE, MAX_ITERATIONS
from ..types import ConvexBody


def load_config_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a configuration file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.

    Returns:
        Dictionary containing the raw JSON data.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_config(path: str) -> GjkConfig:
    """
    Load query parameters from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If a parameter is out of range.
    """
    return config_from_json(load_config_raw(path))


def config_from_json(d: dict[str, Any]) -> GjkConfig:
    """Build a GjkConfig from a dictionary; missing keys take the defaults."""
    return GjkConfig(
        max_iterations=int(d.get("max_iterations", MAX_ITERATIONS)),
        epa_tolerance=float(d.get("epa_tolerance", EPA_TOLERANCE)),
        epa_max_iterations=int(d.get("epa_max_iterations", EPA_MAX_ITERATIONS)),
    )


def config_to_json(config: GjkConfig) -> dict[str, Any]:
    """
    Serialize a GjkConfig to a dictionary (round-trip compatible).

    Only non-default fields are included to keep the output concise.
    """
    result: dict[str, Any] = {}
    if config.max_iterations != MAX_ITERATIONS:
        result["max_iterations"] = config.max_iterations
    if config.epa_tolerance != EPA_TOLERANCE:
        result["epa_tolerance"] = config.epa_tolerance
    if config.epa_max_iterations != EPA_MAX_ITERATIONS:
        result["epa_max_iterations"] = config.epa_max_iterations
    return result


def save_config(config: GjkConfig, path: str, indent: int = 2) -> None:
    """Save a GjkConfig to a JSON file on disk."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config_to_json(config), f, indent=indent)


def vector_from_json(v: Any) -> np.ndarray:
    """
    Parse a 3D vector given as [x, y, z] or {"x": .., "y": .., "z": ..}.

    Raises:
        ValueError: If the value is neither form.
    """
    if isinstance(v, dict):
        try:
            return np.array([float(v["x"]), float(v["y"]), float(v["z"])], dtype=np.float64)
        except KeyError as e:
            raise ValueError(f"Vector object is missing component {e}") from e
    if isinstance(v, (list, tuple)) and len(v) == 3:
        return np.array([float(x) for x in v], dtype=np.float64)
    raise ValueError(f"Expected a 3D vector, got {v!r}")


def body_from_json(d: dict[str, Any]) -> ConvexBody:
    """
    Parse a single convex body definition from a dictionary.

    Raises:
        ValueError: If 'vertices' is missing or empty, or a field is malformed.
    """
    if "vertices" not in d:
        raise ValueError("Body definition missing required 'vertices' field.")
    verts = d["vertices"]
    if len(verts) == 0:
        raise ValueError("Body must have at least one vertex")

    rotation = d.get("rotation")
    if rotation is not None:
        rotation = np.array(rotation, dtype=np.float64)

    return ConvexBody(
        vertices=np.array([vector_from_json(v) for v in verts]),
        position=vector_from_json(d.get("position", [0.0, 0.0, 0.0])),
        rotation=rotation,
        scale=float(d.get("scale", 1.0)),
        id=d.get("id"),
    )


def body_to_json(body: ConvexBody) -> dict[str, Any]:
    """
    Serialize a ConvexBody to a dictionary (round-trip compatible).

    Default transform fields (identity rotation, unit scale, no id) are omitted.
    """
    result: dict[str, Any] = {
        "vertices": body.vertices.tolist(),
        "position": _to_list(body.position),
    }
    if not np.array_equal(body.rotation, np.eye(3)):
        result["rotation"] = body.rotation.tolist()
    if body.scale != 1.0:
        result["scale"] = body.scale
    if body.id is not None:
        result["id"] = body.id
    return result


def bodies_to_json(bodies: list[ConvexBody]) -> list[dict[str, Any]]:
    """Serialize a list of bodies to a JSON-compatible list."""
    return [body_to_json(b) for b in bodies]


def load_bodies(path: str) -> list[ConvexBody]:
    """Load the 'bodies' list of a JSON file (empty if absent)."""
    data = load_config_raw(path)
    return [body_from_json(b) for b in data.get("bodies", [])]


def _to_list(arr: Any) -> list[float]:
    """Helper: Convert numpy array or tuple to a clean list of floats."""
    if isinstance(arr, np.ndarray):
        return arr.tolist()
    return list(arr)
