# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Intersection queries for two infinite lines in the plane.

The intersection of two lines is a solution to `P0 + s0*D0 = P1 + s1*D1`.
Rewrite this as `s0*D0 - s1*D1 = P1 - P0 = Q`.
If `D0.dot_perp(D1) == 0`, the lines are parallel; additionally, if `Q.dot_perp(D1) == 0`, the lines are the same.
Otherwise the lines intersect in a single point where:
  s0 = Q.dot_perp(D1) / D0.dot_perp(D1)
  s1 = Q.dot_perp(D0) / D0.dot_perp(D1)

All comparisons against zero are exact; nearly parallel lines are not treated specially.
'''

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .line import Line
from .query import register_find, register_test
from .scalar import scalar_range
from .vec import V


INFINITE_INTERSECTIONS = 2**31 - 1
'The intersection count reported for coincident lines (the maximum int32 value).'


class Intersection(Enum):
  'The three possible relationships between two lines.'
  none, point, coincident = range(3)


def _kind(num_intersections:int) -> Intersection:
  if num_intersections == 0: return Intersection.none
  if num_intersections == 1: return Intersection.point
  return Intersection.coincident


@dataclass(frozen=True, slots=True)
class TIResult:
  '''
  Result of the line/line test-intersection query.
  * Distinct parallel lines: `intersect=False`, `num_intersections=0`.
  * Single point: `intersect=True`, `num_intersections=1`.
  * Same line: `intersect=True`, `num_intersections=INFINITE_INTERSECTIONS`.
  '''
  intersect:bool = False
  num_intersections:int = 0

  @property
  def kind(self) -> Intersection: return _kind(self.num_intersections)


@dataclass(frozen=True, slots=True)
class FIResult:
  '''
  Result of the line/line find-intersection query.

  If the lines do not intersect, the parameters and point keep their zero defaults, which are not meaningful.

  If the lines intersect in a single point:
  * `line0_param = (s0, s0)` and `line1_param = (s1, s1)`;
  * `point = line0.origin + s0*line0.direction = line1.origin + s1*line1.direction`.

  If the lines are the same, both parameter pairs are `(-max, max)` for the scalar type,
  denoting the entire line; `point` is not meaningful.
  '''
  intersect:bool = False
  num_intersections:int = 0
  line0_param:tuple[Any,Any] = (0, 0)
  line1_param:tuple[Any,Any] = (0, 0)
  point:V = V()

  @property
  def kind(self) -> Intersection: return _kind(self.num_intersections)


@register_test(Line, Line)
def test_line2_line2(line0:Line, line1:Line) -> TIResult:
  'Classify the intersection of two lines without computing the point.'
  d0_perp_d1 = line0.direction.dot_perp(line1.direction)
  if d0_perp_d1 != 0: # Not parallel.
    return TIResult(intersect=True, num_intersections=1)

  # Parallel. The normalized offset gives a zero test independent of the distance between the origins.
  # Coincident origins normalize to the zero vector, which correctly reports the same line.
  diff_n = (line1.origin - line0.origin).norm_or_zero
  if diff_n.dot_perp(line1.direction) != 0: # Parallel but distinct.
    return TIResult(intersect=False, num_intersections=0)

  return TIResult(intersect=True, num_intersections=INFINITE_INTERSECTIONS)


@register_find(Line, Line)
def find_line2_line2(line0:Line, line1:Line) -> FIResult:
  'Classify the intersection of two lines, and compute the parameters and point of a single intersection.'
  q = line1.origin - line0.origin
  d0_perp_d1 = line0.direction.dot_perp(line1.direction)
  if d0_perp_d1 != 0: # Not parallel.
    s0 = q.dot_perp(line1.direction) / d0_perp_d1
    s1 = q.dot_perp(line0.direction) / d0_perp_d1
    return FIResult(
      intersect=True,
      num_intersections=1,
      line0_param=(s0, s0),
      line1_param=(s1, s1),
      point=line0.origin + line0.direction * s0)

  # Parallel; no normalization is needed for the zero test.
  q_perp_d1 = q.dot_perp(line1.direction)
  if q_perp_d1 != 0: # Parallel but distinct.
    return FIResult(intersect=False, num_intersections=0)

  # Both products are zero; their sum has the scalar type of the origins and directions combined.
  full = scalar_range(q_perp_d1 + d0_perp_d1)
  return FIResult(intersect=True, num_intersections=INFINITE_INTERSECTIONS, line0_param=full, line1_param=full)
