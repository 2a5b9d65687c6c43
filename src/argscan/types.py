## argscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Literal
from dataclasses import dataclass, field


LONG_MARKER = '--'
SHORT_MARKER = '-'

HELP_TOKENS = ('--help', '-h')
VERSION_TOKENS = ('--version', '-v')
RESERVED_TOKENS = HELP_TOKENS + VERSION_TOKENS

DEFAULT_NAME = 'My Program'
DEFAULT_VERSION = '0.0.1'


def looks_like_option(token: str) -> bool:
    return token.startswith(SHORT_MARKER)


@dataclass
class OptionSpec:
    name: str                   # --run
    short: str | None           # -r
    manual: str                 # -r, --run
    description: str = ''
    value: str | None = None    # None until seen, '' for a bare flag.

    def matches(self, token: str) -> bool:
        return token == self.name or (self.short is not None and token == self.short)


@dataclass
class PositionalSpec:
    name: str                   # build
    manual: str                 # build [targets]
    description: str = ''
    values: list[str] = field(default_factory=list)
    terminated: bool = False

    def reset(self) -> None:
        self.values.clear()
        self.terminated = False


@dataclass(frozen=True)
class ScanConfig:
    unknown: Literal['ignore', 'warn', 'error'] = 'ignore'
    builtins: Literal['continue', 'exit'] = 'continue'
    color: bool | None = None

    def __post_init__(self):
        if self.unknown not in ('ignore', 'warn', 'error'):
            raise ValueError(f"Unsupported unknown-token policy `{self.unknown}`.")
        if self.builtins not in ('continue', 'exit'):
            raise ValueError(f"Unsupported built-in policy `{self.builtins}`.")
