## argscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import OptionSpec, PositionalSpec, ScanConfig
from .errors import *
from .cli import CLI
from .parser import parse_manual
from .formatting import format_help, format_version

__version__ = '0.1.0'
