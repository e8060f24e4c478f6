# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Representable ranges of scalar types.
Coincident lines report the parameter interval `(-scalar_max(s), scalar_max(s))`,
meaning "the entire line" rather than a literal numeric bound.
'''

from decimal import Decimal, getcontext
from functools import singledispatch
from math import inf
from sys import float_info
from typing import Any


@singledispatch
def scalar_max(sample:Any) -> Any:
  '''
  Return the largest finite value representable by the type of `sample`.
  Types with no finite maximum (int, `fractions.Fraction`, and unregistered types) are unbounded,
  and are represented by the float `inf`.
  '''
  return inf


@scalar_max.register
def _(sample:float) -> float:
  return float_info.max


@scalar_max.register
def _(sample:Decimal) -> Decimal:
  # The largest finite value of the current context: all nines at full precision, with exponent Emax.
  ctx = getcontext()
  return Decimal((0, (9,) * ctx.prec, ctx.Emax - ctx.prec + 1))


def scalar_range(sample:Any) -> tuple[Any,Any]:
  'The `(min, max)` pair for the type of `sample`.'
  m = scalar_max(sample)
  return (-m, m)
