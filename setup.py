from pathlib import Path
from typing import List

from setuptools import setup, find_packages


def parse_requirements(filename: str) -> List[str]:
    """Return requirements from requirements file."""
    # Ref: https://stackoverflow.com/a/42033122/
    requirements = (Path(__file__).parent / filename).read_text().strip().split('\n')
    requirements = [r.strip() for r in requirements]
    requirements = [r for r in sorted(requirements) if r and not r.startswith('#')]
    return requirements


setup(
    name='combipack',
    version='0.1.0',
    description='order-independent packing of four 5-bit values into a 16-bit code',
    keywords='bitpacking combinadic combinatorial multiset encoding',
    long_description=Path(__file__).with_name('README.md').read_text().strip(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'tests.*', 'util', 'util.*']),
    install_requires=parse_requirements('requirements/install.in'),
    python_requires='>=3.8',
    package_data={'combipack': ['logging.conf']},
    classifiers=[  # https://pypi.org/classifiers/
        "Programming Language :: Python :: 3.8",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: System :: Archiving :: Compression",
    ],
)
