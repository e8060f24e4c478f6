# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='isect',
  version='0.1.0',
  description='Exact intersection queries between infinite lines in the plane.',
  python_requires='>=3.10',

  packages=['isect', 'isect.bin', 'utest'],
  entry_points={
    'console_scripts': [
      'isect-lines=isect.bin.isect_lines:main',
    ],
  },
)
