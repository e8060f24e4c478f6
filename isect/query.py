# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Generic intersection queries, dispatched over the pair of primitive types.

There are two kinds of query for every pair of primitives:
* a test-intersection query, which only classifies the relationship (does it intersect, and how many points);
* a find-intersection query, which also computes the intersection set.

Query implementations register themselves for an ordered pair of types:
```
@register_find(Line, Line)
def find_line2_line2(line0:Line, line1:Line) -> FIResult: ...
```
'''

from types import MappingProxyType
from typing import Any, Callable, TypeVar


class QueryKeyError(KeyError):
  'Raised when no query is registered for a pair of types, or when a pair is registered twice.'


_F = TypeVar('_F', bound=Callable)
_Key = tuple[type,type]

_test_registry:dict[_Key,Callable] = {}
_find_registry:dict[_Key,Callable] = {}

test_registry = MappingProxyType(_test_registry)
find_registry = MappingProxyType(_find_registry)


def register_test(type0:type, type1:type) -> Callable[[_F], _F]:
  'Decorator to register a test-intersection query for arguments of types `(type0, type1)`.'
  return _register(_test_registry, 'test', type0, type1)


def register_find(type0:type, type1:type) -> Callable[[_F], _F]:
  'Decorator to register a find-intersection query for arguments of types `(type0, type1)`.'
  return _register(_find_registry, 'find', type0, type1)


def _register(registry:dict[_Key,Callable], kind:str, type0:type, type1:type) -> Callable[[_F], _F]:

  def decorator(fn:_F) -> _F:
    if not callable(fn): raise TypeError(f'{kind} query is not callable: {fn!r}')
    key = (type0, type1)
    try: existing = registry[key]
    except KeyError: pass
    else: raise QueryKeyError(f'{kind} query for {_key_desc(key)} is already registered: {existing.__qualname__}')
    registry[key] = fn
    return fn

  return decorator


def test_intersection(a:Any, b:Any) -> Any:
  'Classify the intersection of primitives `a` and `b` without computing the intersection set.'
  return _lookup(_test_registry, 'test', a, b)(a, b)


def find_intersection(a:Any, b:Any) -> Any:
  'Classify the intersection of primitives `a` and `b` and compute the intersection set.'
  return _lookup(_find_registry, 'find', a, b)(a, b)


def registered_pairs() -> list[_Key]:
  'All type pairs that have a test or find query registered, in registration order.'
  return list(dict.fromkeys([*_test_registry, *_find_registry]))


def _lookup(registry:dict[_Key,Callable], kind:str, a:Any, b:Any) -> Callable:
  # Walk both MROs so that subclasses dispatch to the query of their nearest registered base.
  for t0 in type(a).__mro__:
    for t1 in type(b).__mro__:
      try: return registry[(t0, t1)]
      except KeyError: pass
  raise QueryKeyError(f'no {kind} query registered for {_key_desc((type(a), type(b)))}')


def _key_desc(key:_Key) -> str:
  t0, t1 = key
  return f'({t0.__qualname__}, {t1.__qualname__})'
