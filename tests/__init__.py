
import sys
from os import path

CCHECKER_SRC_DIR = path.dirname(path.abspath(__file__))
CCHECKER_SRC_DIR = path.normpath(path.join(CCHECKER_SRC_DIR, path.pardir, 'src'))

if CCHECKER_SRC_DIR not in sys.path:
    sys.path.insert(1, CCHECKER_SRC_DIR)
