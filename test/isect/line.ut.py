# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from isect.line import Line
from isect.vec import V
from utest import utest, utest_exc


utest(Line(V(1, 1), V(2, 3)), Line.from_points, V(1, 1), V(3, 4))
utest_exc(ValueError('Line.from_points requires distinct points; received (1,1) and (1,1).'),
  Line.from_points, V(1, 1), V(1, 1))

utest('(1,1)+s(2,3)', str, Line(V(1, 1), V(2, 3)))

utest(V(1, 1), Line.at, Line(V(1, 1), V(2, 3)), 0)
utest(V(3, 4), Line.at, Line(V(1, 1), V(2, 3)), 1)
utest(V(-1, -2), Line.at, Line(V(1, 1), V(2, 3)), -1)
utest(V(2, 2.5), Line.at, Line(V(1, 1), V(2, 3)), 0.5)

utest(V(0, 0), Line.project, Line(V(-1, 0), V(2, 0)), V(0, 1))
utest(V(1, 1), Line.project, Line(V(0, 0), V(2, 2)), V(2, 0))
utest(V(4, 3), Line.project, Line.from_points(V(6, 4), V(2, 2)), V(2, 7))
utest(V(5, 5), Line.project, Line(V(5, 5), V(0, 0)), V(1, 2)) # Degenerate direction.
