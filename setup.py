#!/usr/bin/env python
from setuptools import setup
setup(
    name='sbtconnections',
    version='1.0',
    description='Python objects for a social-collaboration communities API',
    author='Six Apart Ltd.',
    author_email='python@sixapart.com',

    packages=['sbtconnections'],
    provides=['sbtconnections'],
    python_requires='>=3.7',
    install_requires=['httplib2>=0.4.0', 'lxml>=4.0'],
    extras_require={
        'test': ['mock', 'pytest'],
    },
)
