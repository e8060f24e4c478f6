#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, walk
from os.path import abspath as abs_path, isfile as is_file, join as path_join
from subprocess import run
from sys import executable


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  env.setdefault('UTEST_WORK_DIR', getcwd())
  # Tests import the packages of the working directory, whether or not they are installed.
  env['PYTHONPATH'] = ':'.join(p for p in (getcwd(), env.get('PYTHONPATH')) if p)

  ok = True
  count = 0
  for path in walk_test_files(args.paths):
    print(path)
    count += 1
    c = run([executable, abs_path(path)], env=env).returncode
    if c != 0:
      ok = False
      print()

  if not count: exit(f'utest: no ".ut.py" files found in: {" ".join(args.paths)}')
  exit(0 if ok else 1)


def walk_test_files(paths:list[str]) -> list[str]:
  'Return the sorted ".ut.py" files found at or beneath each of `paths`.'
  found:list[str] = []
  for path in paths:
    if is_file(path):
      found.append(path)
      continue
    for dir_path, dir_names, file_names in walk(path):
      dir_names.sort()
      found.extend(path_join(dir_path, n) for n in sorted(file_names) if n.endswith('.ut.py'))
  return found


if __name__ == '__main__': main()
