from pathlib import Path

from setuptools import find_packages
from setuptools import setup

package_name = 'markdown_converter'
short_description = (
    'Convert a Markdown document into a single self-contained, styled HTML page.')

this_directory = Path(__file__).parent
with open(this_directory / 'README.md') as f:
    long_description = f.read()

setup(
    name='markdown-page-converter',
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    maintainer='ROS Tooling Working Group',
    maintainer_email='ros-tooling@googlegroups.com',
    description=short_description,
    long_description=long_description,
    long_description_content_type='text/markdown',
    install_requires=[
        'Markdown>=3.4',
        'Pygments>=2.12',
    ],
    extras_require={
        'test': [
            'flake8',
            'mypy',
            'pydocstyle',
            'pytest',
        ],
    },
    zip_safe=True,
    entry_points={'console_scripts': [
      'markdown-to-html = markdown_converter.convert:main',
    ]},
    python_requires='>=3.8',
)
