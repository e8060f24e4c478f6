# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from fractions import Fraction

from isect.intr_line2 import Intersection
from isect.logfmt import logfmt, logfmt_escape, logfmt_items, logfmt_key, logfmt_val
from isect.vec import V
from utest import utest


utest('_', logfmt_key, '')
utest('num', logfmt_key, 'num')
utest('a_b_c', logfmt_key, 'a b=c')

utest('true', logfmt_val, True)
utest('false', logfmt_val, False)
utest('', logfmt_val, None)
utest('1', logfmt_val, 1)
utest('0', logfmt_val, 0)
utest('-0.25', logfmt_val, -0.25)
utest('coincident', logfmt_val, Intersection.coincident)
utest('(1,-1)', logfmt_val, (1.0, -1.0))
utest('(1/2,3)', logfmt_val, V(Fraction(1, 2), 3))

utest('""', logfmt_escape, '')
utest('"a b"', logfmt_escape, 'a b')
utest('"a=b"', logfmt_escape, 'a=b')
utest('\\"q\\"', logfmt_escape, '"q"')
utest('a\\nb', logfmt_escape, 'a\nb')

utest('a=1 b=x', logfmt_items, {'a': 1, 'b': 'x'})
utest('a=1 b=x', logfmt_items, [('a', 1), ('b', 'x')])
utest('kind=point intersect=true num=1', logfmt, kind=Intersection.point, intersect=True, num=1)
