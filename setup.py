#!/usr/bin/env python3
"""
Setup script for slurm-expand package
"""
from setuptools import setup
from pathlib import Path

# Read README
readme_file = Path(__file__).parent / 'README.md'
long_description = readme_file.read_text(encoding='utf-8') if readme_file.exists() else ''


setup(
    name='slurm-expand',
    version='0.1.0',
    description='Print a machine file from the SLURM node list and tasks per node',
    long_description=long_description,
    long_description_content_type='text/markdown',
    python_requires='>=3.7',
    packages=['slurm_expand', 'slurm_expand.lib'],
    package_dir={
        'slurm_expand': 'slurm_expand',
        'slurm_expand.lib': 'slurm_expand/lib',
    },
    install_requires=[],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'slurm-expand=slurm_expand.cli:main',
        ],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Topic :: System :: Clustering',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.7',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
