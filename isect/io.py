# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import sys
from typing import Any, TextIO


# The standard streams are looked up at call time so that redirection (e.g. `contextlib.redirect_stdout`) applies.

def writeL(file:TextIO, *items:Any, sep='', flush=False) -> None:
  "Write `items` to file; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=file, flush=flush)

def outL(*items:Any, sep='', flush=False) -> None:
  "Write `items` to std out; sep='', end='\\n'."
  writeL(sys.stdout, *items, sep=sep, flush=flush)

def errL(*items:Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  writeL(sys.stderr, *items, sep=sep, flush=flush)
