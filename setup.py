# Always prefer setuptools over distutils
import re

from setuptools import setup, find_packages
# To use a consistent encoding
from codecs import open
from os import path

here = path.abspath(path.dirname(__file__))

# read the version from xmltreebank/_version.py
version_file_contents = open(path.join(here, 'xmltreebank/_version.py'), encoding='utf-8').read()
VERSION = re.compile('__version__ = \"(.*)\"').search(version_file_contents).group(1)

# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='xmltreebank',

    version=VERSION,

    description='Reads constituency trees from XML treebanks such as the Spanish AnCora treebank',
    long_description=long_description,
    long_description_content_type="text/markdown",

    license='Apache License 2.0',

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 4 - Beta',

        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',

        'Topic :: Scientific/Engineering :: Information Analysis',
        'Topic :: Text Processing',
        'Topic :: Text Processing :: Linguistic',
        'Topic :: Software Development :: Libraries',

        'Programming Language :: Python :: 3',
    ],

    keywords='natural-language-processing nlp treebank constituency-parsing spanish',

    packages=find_packages(exclude=['data', 'docs']),

    # List run-time dependencies here.  These will be installed by pip when
    # your project is installed.
    install_requires=['tqdm'],

    python_requires='>=3.6',

    # $ pip install -e .[dev,test]
    extras_require={
        'dev': ['check-manifest'],
        'test': ['coverage', 'pytest'],
    },

    include_package_data=True,

    entry_points={
        'console_scripts': [
            'print_xml_treebank = xmltreebank.utils.datasets.constituency.print_xml_treebank:main',
        ],
    },
)
