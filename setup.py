import setuptools
from setuptools import find_packages

with open('README.md', 'r') as fh:
    long_description = fh.read()

setuptools.setup(
    name='dbl-allen',
    version='0.1',
    author='Ricardo Portilla, Tristan Nixon',
    author_email='labs@databricks.com',
    description="Allen's interval algebra for discrete and continuous time domains",
    long_description=long_description,
    long_description_content_type='text/markdown',
    url='https://github.com/databrickslabs/tempo',
    packages=find_packages(where=".", include=["allen", "allen.*"]),
    install_requires=[
        'numpy',
        'pandas',
        'pyspark',
    ],
    extras_require=dict(tests=["pytest"]),
    python_requires='>=3.8',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        ],
    )
