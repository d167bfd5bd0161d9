"""A setuptools based setup module for tum-toolbox
"""

import sys
from os import path

from setuptools import setup, find_packages


def _forbid_publish():
    argv = sys.argv
    blacklist = ['register', 'upload']

    for command in blacklist:
        if command in argv:
            values = {'command': command}
            print('Command "%(command)s" has been blacklisted, exiting...' %
                  values)
            sys.exit(2)


_forbid_publish()

HERE = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(HERE, 'README.md'), encoding='utf-8') as f:
    LONG_DESCRIPTION = f.read()

REQUIREMENTS = [
    'numpy',
    'numpy-quaternion',
    'torch'
]

setup(
    name='tum-toolbox',
    version='0.0.1',
    description='Streaming readers for TUM RGB-D benchmark files',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    url='',
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3'
    ],
    keywords='slam rgbd benchmark trajectory',
    packages=find_packages(exclude=['*._tests']),
    install_requires=REQUIREMENTS,
    extras_require={
        'test': ['pytest']
    },
    entry_points={
        'console_scripts': [
            'tumtb-cat=tumtb.app.tum_cat.__main__:_main',
        ]
    }
)
