# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from math import hypot, isfinite
from numbers import Number
from typing import Any, overload, Union


def _fmt_scalar(f:Any) -> str:
  # Integral floats print without the trailing '.0', within the range where floats represent integers exactly.
  if isinstance(f, float) and f.is_integer() and abs(f) < 2**53: return str(int(f))
  return str(f)


@dataclass(frozen=True, slots=True)
class V(Sequence[Any]):
  '''
  V is a 2D vector type, used for both points and directions.
  The components are named x and y, and default to zero if not specified.
  The components can be any scalar type that supports the arithmetic operators:
  float, int, `fractions.Fraction` or `decimal.Decimal`.
  Vector operations preserve the scalar type, except for `mag` and `norm`, which require a square root.
  '''

  x:Any = 0
  y:Any = 0


  def __str__(self) -> str:
    return f'({_fmt_scalar(self.x)},{_fmt_scalar(self.y)})'


  def __repr__(self) -> str: return f'V{self}'


  # Arithmetic operations.

  def __neg__(self) -> 'V': return V(-self.x, -self.y)


  def __bool__(self) -> bool: return bool(self.x or self.y)


  def __add__(self, r:'V') -> 'V':
    if not isinstance(r, V): return NotImplemented
    return V(self.x + r.x, self.y + r.y)


  def __sub__(self, r:'V') -> 'V':
    if not isinstance(r, V): return NotImplemented
    return V(self.x - r.x, self.y - r.y)


  def __mul__(self, s:Union[Any,'V']) -> 'V':
    if isinstance(s, V): # Elementwise multiplication.
      return V(self.x*s.x, self.y*s.y)
    if not isinstance(s, Number): return NotImplemented
    return V(self.x*s, self.y*s)


  def __rmul__(self, s:Any) -> 'V':
    if not isinstance(s, Number): return NotImplemented
    return V(s*self.x, s*self.y)


  def __truediv__(self, r:Union[Any,'V']) -> 'V':
    if isinstance(r, V): # Elementwise division.
      return V(self.x / r.x, self.y / r.y)
    if not isinstance(r, Number): return NotImplemented
    return V(self.x / r, self.y / r)


  def __len__(self) -> int: return 2


  def __iter__(self):
    yield self.x
    yield self.y


  @overload
  def __getitem__(self, i:int) -> Any: ...

  @overload
  def __getitem__(self, i:slice) -> tuple[Any,...]: ...

  def __getitem__(self, i):
    match i:
      case 0: return self.x
      case 1: return self.y
      case _: # Assume that `i` is a slice or a negative index.
        return (self.x, self.y)[i]


  @property
  def is_finite(self) -> bool:
    return isfinite(self.x) and isfinite(self.y)


  @property
  def mag(self) -> Any:
    'Magnitude (length) of the vector. Neither overflows nor underflows for float components.'
    if isinstance(self.x, Decimal) or isinstance(self.y, Decimal): return self.mag2.sqrt()
    return hypot(self.x, self.y)


  @property
  def mag2(self) -> Any:
    'Magnitude squared of the vector.'
    return self.x*self.x + self.y*self.y


  @property
  def norm(self) -> 'V':
    'Normalized vector. Raises ValueError for the zero vector.'
    l = self.mag
    if not l > 0: raise ValueError(f'Cannot normalize zero vector: {self}.')
    n = self / l
    if not n.is_finite: raise ValueError(f'Normalized vector is not finite: {n}.')
    return n


  @property
  def norm_or_zero(self) -> 'V':
    '''
    Normalized vector, or the zero vector if the magnitude is zero.
    Unlike `norm`, this never raises.
    '''
    l = self.mag
    if not l > 0: return V(self.x*0, self.y*0)
    return self / l


  def dot(self, r:'V') -> Any:
    'Dot product.'
    return self.x*r.x + self.y*r.y


  def dot_perp(self, r:'V') -> Any:
    '''
    The perpendicular dot product, `self.x*r.y - self.y*r.x`.
    This is the determinant of the two vectors, i.e. the signed area of the parallelogram they span;
    it is zero exactly when the vectors are parallel or either one is zero.
    '''
    return self.x*r.y - self.y*r.x

