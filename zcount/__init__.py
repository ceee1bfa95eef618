import logging

# fmt: off
from .scanner import count_zero_bytes, scan_path #noqa
from .policy import Thresholds, Verdict, evaluate #noqa
from .constants import PROGRAM_VERSION # noqa
# fmt: on

# Library users only see our debug records if they configure logging themselves
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = PROGRAM_VERSION
