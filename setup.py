import os
from os import path

from setuptools import find_packages
from setuptools import setup

MYDIR = path.abspath(os.path.dirname(__file__))


def load_version():
    filename = path.join(MYDIR, 'uricomponents', 'version.py')
    namespace = {}
    with open(filename, encoding='utf-8') as version_file:
        exec(version_file.read(), namespace)

    return namespace['__version__']


setup(
    name='uricomponents',
    version=load_version(),
    description=(
        'Immutable URI component value objects with RFC 3986 '
        'percent-encoding and dot-segment normalization.'
    ),
    license='Apache-2.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries',
    ],
)
