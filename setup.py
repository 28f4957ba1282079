from os import chdir
from os.path import join, dirname, abspath
from setuptools import setup


def read_path(filename):
    with open(join(project_dir, filename)) as f:
        return f.read()

# Documentation on this setup function can be found at
#
# https://setuptools.readthedocs.io/en/latest/ (2018-09-04)
#

# PEP 345
# https://www.python.org/dev/peps/pep-0345/

# PEP 440 -- Version Identification and Dependency Specification
# https://www.python.org/dev/peps/pep-0440/


install_requires = []


project_dir = abspath(dirname(__file__))
chdir(project_dir)
setup(
    name="haka-seq",
    version="1.2.0",
    python_requires='>=3.6',
    install_requires=install_requires,
    tests_require=['mock'],
    extras_require={
        'test': ['mock', 'pytest'],
    },
    packages=['haka_seq'],
    test_suite="tests",
    author="Keegan Callin",
    author_email="kc@kcallin.net",
    description="Inclusive integer sequences for for-loops.",
    # Instruction on how to create a good README.rst
    #
    # https://packaging.python.org/guides/making-a-pypi-friendly-readme/
    #
    long_description=read_path('README.rst'),
    long_description_content_type='text/x-rst',
    classifiers=[
        # How mature is this project? Common values are
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        'Development Status :: 5 - Production/Stable',

        # Indicate who your project is intended for
        'Intended Audience :: Developers',
        'Topic :: Software Development',
        'Topic :: Software Development :: Libraries',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
        'Operating System :: OS Independent',
    ],
)
