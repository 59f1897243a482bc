from setuptools import setup, find_packages
from os import path


here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()


setup(
    name='aprioriminer',
    version='1.0.0',
    description='The Python project that implements the Apriori frequent itemset and association rule miner',
    long_description=long_description,
    license='GNU',
    packages=find_packages(exclude=['contrib', 'docs', 'tests']),
    package_data={'aprioriminer.Sample': ['Data/*.txt']},
    install_requires=['pandas', 'numpy'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.6',
)
