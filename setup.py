

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import sys
if sys.hexversion < 0x3060000:
    raise ImportError('Python >= 3.6 is required')

from setuptools import setup

here = os.path.dirname(os.path.abspath(__file__))
os.chdir(here)

SRC_DIR = 'src'

sys.path.append(os.path.join(here, SRC_DIR))
from cchecker import version
from cchecker.constants import APPNAME, AUTHOR

AUTHOR_EMAIL = 'pustotnik@gmail.com'

DESCRIPTION = 'Configure-time checks for C headers, libraries and OS features'
with open(os.path.join(here, "README.rst"), "r") as fh:
    LONG_DESCRIPTION = fh.read()

CLASSIFIERS = """\
Development Status :: 4 - Beta
License :: OSI Approved :: BSD License
Environment :: Console
Intended Audience :: Developers
Programming Language :: Python
Programming Language :: Python :: 3 :: Only
Programming Language :: Python :: Implementation :: CPython
Operating System :: POSIX :: Linux
Operating System :: MacOS
Operating System :: POSIX :: BSD
Topic :: Software Development :: Build Tools
""".splitlines()

PYTHON_REQUIRES = '>=3.6'
RUNTIME_DEPS = ['PyYAML', 'setuptools']
TEST_DEPS = ['pytest', 'pytest-mock']

PKG_DIRS = [APPNAME]

kwargs = dict(
    name = APPNAME,
    version = version.current(),
    license = 'BSD',
    description = DESCRIPTION,
    long_description = LONG_DESCRIPTION,
    long_description_content_type = "text/x-rst",
    author = AUTHOR,
    author_email = AUTHOR_EMAIL,
    zip_safe = False,
    packages = PKG_DIRS,
    package_dir = {'': SRC_DIR},
    classifiers = CLASSIFIERS,
    python_requires = PYTHON_REQUIRES,
    install_requires = RUNTIME_DEPS,
    extras_require = {
        'test' : TEST_DEPS,
    },
    entry_points = {
        'console_scripts': [
            '%s = %s.starter:main' % (APPNAME, APPNAME),
        ],
    },
)

DEFAULT_SETUP_CMDS = 'sdist bdist_wheel'

def main():

    if len(sys.argv) == 1:
        sys.argv.extend(DEFAULT_SETUP_CMDS.split())

    setup(**kwargs)

if __name__ == '__main__':
    main()
