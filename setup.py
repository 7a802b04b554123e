# -*- coding: utf-8 -*-
"""Setup for the dynatune hyper-parameter tuning library."""
import os

from dynatune import __version__

from setuptools import setup, find_packages


here = os.path.abspath(os.path.dirname(__file__))
README = open(os.path.join(here, 'README.md')).read()


VERSION = __version__


CLASSIFIERS = """
        Development Status :: 4 - Beta
        Intended Audience :: Science/Research
        Intended Audience :: Developers
        Programming Language :: Python
        Programming Language :: Python :: 3
        Topic :: Software Development
        Topic :: Scientific/Engineering
        Topic :: Scientific/Engineering :: Artificial Intelligence
        Operating System :: Unix
        Operating System :: MacOS

        """


requires = [
    'simplejson>=3.19',
    'numpy',
    'scipy',
    'colander',
    ]

test_requires = [
    'pytest',
    ]


setup(name='dynatune',
      version=VERSION,
      description='Hyper-parameter tuning of trainable models by global optimization of their validation energy',
      long_description=README,
      long_description_content_type='text/markdown',
      classifiers=[_f for _f in CLASSIFIERS.split('\n') if _f.strip()],
      keywords='hyper-parameter tuning global optimization grid search coupled simulated annealing model selection',
      packages=find_packages(),
      include_package_data=True,
      zip_safe=False,
      python_requires='>=3.6',
      install_requires=requires,
      tests_require=test_requires,
      extras_require={
          'test': test_requires,
          },
      test_suite="dynatune",
      )
