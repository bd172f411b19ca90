import json

import numpy as np
import pytest

from hull_collision import GjkConfig
from hull_collision.io import (
    body_from_json,
    body_to_json,
    config_from_json,
    config_to_json,
    load_bodies,
    load_config,
    save_config,
    vector_from_json,
)


def test_config_round_trip(tmp_path):
    config = GjkConfig(max_iterations=20, epa_tolerance=1e-6)
    path = tmp_path / "query.json"
    save_config(config, str(path))

    data = json.loads(path.read_text())
    # Defaults are not written
    assert "epa_max_iterations" not in data
    assert load_config(str(path)) == config


def test_config_defaults():
    assert config_from_json({}) == GjkConfig()
    assert config_to_json(GjkConfig()) == {}


@pytest.mark.parametrize("field,value", [
    ("max_iterations", 0),
    ("epa_tolerance", -1.0),
    ("epa_max_iterations", -5),
])
def test_config_rejects_non_positive_values(field, value):
    with pytest.raises(ValueError):
        config_from_json({field: value})


def test_vector_forms():
    assert np.array_equal(vector_from_json([1, 2, 3]), [1.0, 2.0, 3.0])
    assert np.array_equal(vector_from_json({"x": 1, "y": 2, "z": 3}), [1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        vector_from_json([1, 2])
    with pytest.raises(ValueError):
        vector_from_json({"x": 1, "y": 2})


def test_body_requires_vertices():
    with pytest.raises(ValueError):
        body_from_json({"position": [0, 0, 0]})
    with pytest.raises(ValueError):
        body_from_json({"vertices": []})


def test_body_round_trip():
    data = {
        "vertices": [[0, 0, 0], {"x": 1, "y": 0, "z": 0}, [0, 1, 0], [0, 0, 1]],
        "position": [1, 2, 3],
        "scale": 2.0,
        "id": "tetra",
    }
    body = body_from_json(data)
    assert body.vertices.shape == (4, 3)
    assert body.id == "tetra"

    out = body_to_json(body)
    assert "rotation" not in out
    assert out["scale"] == 2.0
    again = body_from_json(out)
    assert np.array_equal(again.convex_hull(), body.convex_hull())


def test_load_bodies(tmp_path):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps({
        "max_iterations": 10,
        "bodies": [
            {"vertices": [[0, 0, 0], [1, 0, 0]], "id": 1},
            {"vertices": [[0, 0, 0]], "position": {"x": 5, "y": 0, "z": 0}},
        ],
    }))
    bodies = load_bodies(str(path))
    assert [b.id for b in bodies] == [1, None]
    assert np.array_equal(bodies[1].position, [5.0, 0.0, 0.0])
    assert load_config(str(path)).max_iterations == 10


def test_load_bodies_without_bodies_key(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text("{}")
    assert load_bodies(str(path)) == []
