# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

from cchecker import utils

APPNAME = 'cchecker'
CAP_APPNAME = 'CChecker'
AUTHOR = 'Alexander Magola'

PLATFORM = utils.PLATFORM

TEST_SOURCE_PREFIX = 'test-'
TEST_SOURCE_EXT = '.c'

if PLATFORM == 'windows':
    OBJ_FILE_EXT = '.obj'
    EXE_FILE_EXT = '.exe'
else:
    OBJ_FILE_EXT = '.o'
    EXE_FILE_EXT = ''

CHECKSFILE_NAME = 'ccheck'
CHECKSFILE_EXTS = ['.yaml', '.yml']
CHECKSFILE_FILENAMES = ['%s%s' % (CHECKSFILE_NAME, x) for x in CHECKSFILE_EXTS]

# C compilers to look for in PATH when CC is not set
C_COMPILERS = {
    'windows': ['gcc', 'clang'],
    'darwin':  ['cc', 'clang', 'gcc'],
    'linux':   ['cc', 'gcc', 'clang', 'icc'],
    'default': ['cc', 'clang', 'gcc'],
}

# environment variables with extra flags for the C toolchain
COMPILE_FLAGS_ENV_VARS = ('CPPFLAGS', 'CFLAGS')
LINK_FLAGS_ENV_VARS = ('LDFLAGS',)
