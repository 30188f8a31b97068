'''Setup.'''
import os
from setuptools import setup, find_packages


setup(
    name='loadwatch',
    description='Load test report to CloudWatch metrics adapter',
    version=os.environ.get('VERSION', '0.1.0'),
    python_requires='>=3.11',
    install_requires=(
        'boto3',
        'loguru',
        'pydantic>=2.6',
        'pydantic-settings',
        'python-dotenv',
        'PyYAML',
    ),
    extras_require={'test': ['pytest']},
    packages=find_packages(include=['loadwatch', 'loadwatch.*']),
    scripts=['scripts/validate_plugin_config.py'],
)
