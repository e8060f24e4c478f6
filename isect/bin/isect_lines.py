# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from sys import stdin
from typing import Any, Callable, Iterable, Iterator

from isect.intr_line2 import FIResult, TIResult
from isect.io import errL, outL
from isect.line import Line
from isect.logfmt import logfmt
from isect.query import find_intersection, test_intersection
from isect.vec import V


def main(argv:list[str]|None=None) -> None:
  arg_parser = ArgumentParser(description='Intersect pairs of infinite lines in the plane. '
    'Each line pair is eight numbers, separated by commas or whitespace: `x0 y0 dx0 dy0 x1 y1 dx1 dy1`. '
    'If no pairs are given as arguments, they are read from stdin, one per line.')
  arg_parser.add_argument('pairs', nargs='*', help='line pairs to intersect.')
  arg_parser.add_argument('-test', action='store_true', help='only classify the intersection; do not compute the point.')
  arg_parser.add_argument('-points', action='store_true',
    help='each line is given as two points `ax ay bx by` rather than an origin and a direction.')
  arg_parser.add_argument('-scalar', choices=tuple(scalar_parsers), default='float', help='the scalar type of coordinates.')
  args = arg_parser.parse_args(argv)

  ok = True
  for loc, text in iter_records(args.pairs, stdin):
    try: line0, line1 = parse_line_pair(text, scalar=scalar_parsers[args.scalar], points=args.points)
    except ValueError as e:
      errL(f'{loc}: error: {e}')
      ok = False
      continue
    if args.test:
      outL(fmt_result(test_intersection(line0, line1)))
    else:
      outL(fmt_result(find_intersection(line0, line1)))

  if not ok: exit(1)


def iter_records(pairs:list[str], lines:Iterable[str]) -> Iterator[tuple[str,str]]:
  '''
  Yield `(location, text)` for each line pair: from `pairs` if it is nonempty, otherwise from `lines`.
  `#` comments and blank records are skipped; the location is used to report errors.
  '''
  if pairs:
    records:Iterable[tuple[str,str]] = ((f'arg {i}', s) for i, s in enumerate(pairs, 1))
  else:
    records = ((f'<stdin>:{i}', s) for i, s in enumerate(lines, 1))
  for loc, text in records:
    text = text.partition('#')[0].strip()
    if text: yield loc, text


def parse_line_pair(text:str, scalar:Callable[[str],Any]=float, points=False) -> tuple[Line,Line]:
  '''
  Parse eight comma or whitespace separated numbers into a pair of lines.
  If `points` is true, each line is specified by two points on it; otherwise by an origin and a direction.
  '''
  words = text.replace(',', ' ').split()
  if len(words) != 8: raise ValueError(f'expected 8 numbers; received {len(words)}: {text!r}')
  nums = [scalar(w) for w in words]
  vs = [V(nums[i], nums[i+1]) for i in range(0, 8, 2)]
  if points:
    return Line.from_points(vs[0], vs[1]), Line.from_points(vs[2], vs[3])
  return Line(vs[0], vs[1]), Line(vs[2], vs[3])


def fmt_result(result:TIResult|FIResult) -> str:
  'Format a query result as a logfmt line.'
  fields = dict(kind=result.kind, intersect=result.intersect, num=result.num_intersections)
  if isinstance(result, FIResult):
    fields.update(s0=result.line0_param, s1=result.line1_param, point=result.point)
  return logfmt(**fields)


def parse_decimal(word:str) -> Decimal:
  try: return Decimal(word)
  except InvalidOperation as e: raise ValueError(f'invalid decimal: {word!r}') from e


def parse_fraction(word:str) -> Fraction:
  try: return Fraction(word)
  except ZeroDivisionError as e: raise ValueError(f'invalid fraction: {word!r}') from e


scalar_parsers:dict[str,Callable[[str],Any]] = {
  'float': float,
  'fraction': parse_fraction,
  'decimal': parse_decimal,
}


if __name__ == '__main__': main()
