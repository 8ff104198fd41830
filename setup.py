#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

with open('README.rst') as readme_file:
    readme = readme_file.read()

requirements = []

color_requirements = [
    'Pygments',
    'colorful',
]

test_requirements = [
    'pytest',
]

setup(
    name='jsprint',
    version='0.1.0',
    description="Compact layout engine for generated JavaScript",
    long_description=readme,
    author="Tommi Kaikkonen",
    author_email='kaikkonentommi@gmail.com',
    url='https://github.com/tommikaikkonen/jsprint',
    packages=find_packages(include=['jsprint', 'jsprint.*']),
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        'color': color_requirements,
        'test': test_requirements + color_requirements,
    },
    license="MIT license",
    zip_safe=False,
    keywords='jsprint',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3.6',
    ],
    python_requires='>=3.6',
    test_suite='tests',
    tests_require=test_requirements,
)
