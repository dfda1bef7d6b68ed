#!/usr/bin/env python
"""
sentry-target
~~~~~~~~~~~~~

Exports application log records (logging, logbook and Flask) to Sentry.

:copyright: (c) 2010 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from setuptools import setup, find_packages

install_requires = [
    'Flask',
    'Werkzeug',
    'sentry-sdk>=2.0',
    'simplejson',
]

tests_require = [
    'logbook',
    'pytest',
]

setup(
    name='sentry-target',
    version='1.0.0',
    author='David Cramer',
    author_email='dcramer@gmail.com',
    url='http://github.com/dcramer/django-sentry',
    description='Exports application log records to Sentry',
    long_description=__doc__,
    packages=find_packages(exclude=["tests", "tests.*"]),
    zip_safe=False,
    license='BSD',
    python_requires='>=3.8',
    install_requires=install_requires,
    tests_require=tests_require,
    extras_require={
        'logbook': ['logbook'],
        'test': tests_require,
    },
    include_package_data=True,
    classifiers=[
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'Operating System :: OS Independent',
        'Topic :: Software Development'
    ],
)
