# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
isect: exact intersection queries between infinite lines in the plane.
'''

from .intr_line2 import (FIResult, find_line2_line2, INFINITE_INTERSECTIONS, Intersection, test_line2_line2,
  TIResult)
from .line import Line
from .query import find_intersection, QueryKeyError, registered_pairs, test_intersection
from .scalar import scalar_max, scalar_range
from .vec import V
