# examples/cube_row.py
import itertools
import numpy as np
from hull_collision import ConvexBody, GjkConfig, GjkAlgorithm
from hull_collision.collision import detect_collisions
from hull_collision.logging_utils import setup_default_logging

setup_default_logging("INFO")

cube = np.array(list(itertools.product((-0.5, 0.5), repeat=3)))

# A row of cubes, 0.8 apart: neighbours overlap by 0.2, the rest are disjoint
bodies = [ConvexBody(cube, position=(0.8 * i, 0.0, 0.0), id=i) for i in range(4)]
pairs = list(itertools.combinations(bodies, 2))

hits = detect_collisions(pairs, GjkAlgorithm(GjkConfig(max_iterations=30)))

print("pairs tested:", len(pairs))
for c in hits:
    print(f"{c.first_object.id}-{c.second_object.id}: depth={c.penetration_depth:.4f} status={c.status.value}")
