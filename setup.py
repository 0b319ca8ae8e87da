#!/usr/bin/env python3
"""Setup script for the KNoT Cloud Python SDK."""

from setuptools import setup, find_packages
import os

# Read the README file
here = os.path.abspath(os.path.dirname(__file__))
try:
    with open(os.path.join(here, 'README.md'), encoding='utf-8') as f:
        long_description = f.read()
except FileNotFoundError:
    long_description = 'KNoT Cloud SDK for Python - Manage devices and sensor data in a KNoT Cloud'

setup(
    name='knot-cloud-sdk',
    version='0.1.0',
    description='KNoT Cloud SDK for Python - Manage devices and sensor data in a KNoT Cloud',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(include=['knot_cloud', 'knot_cloud.*']),
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'pydantic>=2.0.0',
        'python-dotenv>=1.0.0',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0.0',
            'pytest-asyncio>=0.21.0',
            'pytest-mock>=3.11.0',
            'black>=23.0.0',
            'isort>=5.12.0',
            'mypy>=1.4.0',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Home Automation',
    ],
    keywords='knot cloud iot meshblu devices sensors sdk',
)
