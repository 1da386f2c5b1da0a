#!/usr/bin/env python
# -*- coding: utf-8 -*-

import os
import codecs
import setuptools


def read(fname):
    file_path = os.path.join(os.path.dirname(__file__), fname)
    return codecs.open(file_path, encoding='utf-8').read()


setuptools.setup(
    name='seqalgo',
    version='0.1.0',
    license='Mozilla Public License 2.0',
    description='Partition and binary search algorithms over generic sequences',
    long_description=read('README.rst'),
    packages=setuptools.find_packages(),
    python_requires='>=3.8',
    install_requires=[],
    extras_require={
        'test': ['pytest>=3.5.0', 'numpy'],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: Implementation :: CPython',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)',
    ],
)
