#!/usr/bin/env python3

from pathlib import Path
from setuptools import setup

setup(
    name='passgen',
    version=(Path(__file__).parent / 'VERSION').read_text().strip(),
    description='Random and memorable password generator',
    packages=['passgen'],
    python_requires='>=3.8',
    install_requires=[
        'blessed',
        'prompt_toolkit',
        'pyperclip',
    ],
    extras_require={
        'tests': ['pytest'],
    },
    entry_points={
        'console_scripts': ['passgen=passgen.main:main'],
    },
)
