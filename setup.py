#!/usr/bin/env python

"""Set up the pyjalali package.

(C) Copyright 2025 The pyjalali Authors.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

This package can be installed using pip as follows:

    pip install pyjalali

To install with the test requirements:

    pip install 'pyjalali[test]'
"""

import os
import re

from setuptools import setup

with open(os.path.join(os.path.dirname(__file__), 'pyjalali', '__init__.py')) as v:
    m = re.search(r"^ *__version__ *= *'(.*?)'", v.read(), re.M)
    if m is None:
        raise RuntimeError("Cannot detect version in pyjalali/__init__.py")
    VERSION = m.group(1)

readme = os.path.join(os.path.dirname(__file__), 'README.rst')

setup(
    name='pyjalali',
    version=VERSION,
    author='pyjalali developers',
    description='Persian (Jalali) calendar conversion and formatting',
    keywords='persian jalali shamsi solar hijri calendar date time',
    packages=['pyjalali'],
    license='BSD License',
    long_description=open(readme).read(),
    python_requires='>=3.7',
    install_requires=['pytz>=2015.4', 'tzlocal'],
    extras_require=dict(test=['pytest', 'jdcal']),
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Natural Language :: Persian',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Internationalization',
        'Topic :: Software Development :: Localization',
    ],
)
