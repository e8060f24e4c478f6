# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from dataclasses import dataclass
from typing import Any

from .vec import V


@dataclass(frozen=True, slots=True)
class Line:
  '''
  An infinite line in the plane, defined by an origin point and a direction vector.
  The points of the line are `origin + s*direction` for all scalars `s`.
  The direction is not required to be normalized; parameters are measured in multiples of its length.
  '''
  origin:V
  direction:V


  def __str__(self) -> str: return f'{self.origin}+s{self.direction}'


  @classmethod
  def from_points(cls, a:V, b:V) -> 'Line':
    'Create the line through `a` and `b`, with origin `a` and direction `b - a`.'
    d = b - a
    if not d: raise ValueError(f'Line.from_points requires distinct points; received {a} and {b}.')
    return cls(a, d)


  def at(self, s:Any) -> V:
    'The point at parameter `s`.'
    return self.origin + self.direction * s


  def project(self, p:V) -> V:
    'Project point `p` onto the line. A zero direction is ill-defined; the origin is returned.'
    d = self.direction
    mag2 = d.mag2
    if mag2 == 0: return self.origin
    return self.origin + d * ((p - self.origin).dot(d) / mag2)
