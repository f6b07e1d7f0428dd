# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='tally',
  version='0.1.0',
  description='A dynamically resizable histogram of integer samples.',
  python_requires='>=3.10',
  packages=['tally', 'tally.bin', 'utest'],
  entry_points={'console_scripts': ['histo=tally.bin.histo:main']},
)
