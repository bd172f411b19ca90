# examples/overlapping_cubes.py
import itertools
import numpy as np
from hull_collision import Collision, ConvexBody, GjkAlgorithm
from hull_collision.logging_utils import setup_default_logging

setup_default_logging("DEBUG")

cube = np.array(list(itertools.product((-0.5, 0.5), repeat=3)))

a = ConvexBody(cube, position=(0.0, 0.0, 0.0), id="a")
b = ConvexBody(cube, position=(0.5, 0.0, 0.0), id="b")

collision = Collision(a, b)
hit = GjkAlgorithm().intersect(a.convex_hull(), b.convex_hull(), collision)

print("hit:", hit)
print("status:", collision.status)
print("depth:", collision.penetration_depth)
print("normal:", collision.unit_normal)
print("poc a:", collision.first_poc)
print("poc b:", collision.second_poc)
