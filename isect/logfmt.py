# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
A lightweight implementation of the logfmt `key=value` format, used for query results on the command line.
The format defers to the logfmt implementation in Go:
https://pkg.go.dev/github.com/kr/logfmt#section-documentation
'''

from enum import Enum
from typing import Any, Iterable, Mapping

from .vec import V


def logfmt_key(key:str) -> str:
  '''
  Convert a key string into a valid logfmt key.
  Valid keys consist of printable characters excluding ' ', '=' and '"'; other characters are replaced with '_'.
  '''
  if not key: return '_'
  return ''.join(c if (c.isprintable() and c not in ' "=') else '_' for c in key)


logfmt_prim_val_strs = {
  True: 'true',
  False: 'false',
  None: '',
}


def logfmt_val(value:Any) -> str:
  if value is True or value is False or value is None: return logfmt_prim_val_strs[value]
  if isinstance(value, Enum): return logfmt_escape(value.name)
  if isinstance(value, tuple): return logfmt_escape(str(V(*value)))
  return logfmt_escape(str(value))


def logfmt_escape(value:str) -> str:
  'Escape a string for logfmt.'
  if value == '': return '""'
  value = value.replace('"', '\\"')
  value = value.replace('\n', '\\n')
  needs_quotes = ' ' in value or '=' in value
  if needs_quotes: value = f'"{value}"'
  return value


def logfmt_items(items:Iterable[tuple[str,Any]]|Mapping[str,Any]) -> str:
  'Format an iterable or mapping of parameters into a logfmt string.'
  if isinstance(items, Mapping): items = items.items()
  return ' '.join(f'{logfmt_key(k)}={logfmt_val(v)}' for k, v in items)


def logfmt(**kwargs:Any) -> str:
  'Format a logfmt string from keyword arguments.'
  return logfmt_items(kwargs)
