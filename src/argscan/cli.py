## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# argscan — Declare options and positional arguments, scan the argument vector, query by name.
#

import sys
from typing import Sequence

import click

from .types import OptionSpec, PositionalSpec, ScanConfig, SHORT_MARKER
from .errors import CliDeclarationError
from .parser import parse_manual
from .scanner import scan
from .formatting import format_help, format_version


class CLI:
    """Fluent command-line definition; every builder method returns `self`."""

    def __init__(self, config: ScanConfig | None = None):
        self.name: str | None = None
        self.version: str | None = None
        self.description: str | None = None
        self.options: list[OptionSpec] = []
        self.args: list[PositionalSpec] = []
        self.config = config or ScanConfig()

    def __repr__(self):
        return f"CLI(name={self.name!r}, options={len(self.options)}, args={len(self.args)})"

    # Declaration ─────────────────────────────────────────────────────────────────────────────
    def set_name(self, name: str) -> 'CLI':
        self.name = name
        return self

    def set_version(self, version: str) -> 'CLI':
        self.version = version
        return self

    def set_description(self, description: str) -> 'CLI':
        self.description = description
        return self

    def declare_argument(self, name: str, manual: str | None = None, description: str = '') -> 'CLI':
        if not name or name.startswith(SHORT_MARKER):
            raise CliDeclarationError(f"argument name should be a bare word ({name})", manual=manual, part=name)
        self.args.append(PositionalSpec(name=name, manual=manual or name, description=description))
        return self

    def declare_option(self, manual: str, description: str = '') -> 'CLI':
        short, name = parse_manual(manual)
        self.options.append(OptionSpec(name=name, short=short, manual=manual, description=description))
        return self

    # Scanning ────────────────────────────────────────────────────────────────────────────────
    def parse(self, args: Sequence[str] | None = None) -> 'CLI':
        """Scan `args`, or `sys.argv` without the program name when omitted."""
        for opt in self.options:
            opt.value = None
        for arg in self.args:
            arg.reset()
        scan(self, sys.argv[1:] if args is None else args)
        return self

    # Access ──────────────────────────────────────────────────────────────────────────────────
    def option(self, name: str) -> OptionSpec | None:
        return next((o for o in self.options if o.name == name), None)

    def argument(self, name: str) -> PositionalSpec | None:
        return next((a for a in self.args if a.name == name), None)

    def get(self, name: str) -> tuple[str, ...] | None:
        if (opt := self.option(name)) is not None:
            return None if opt.value is None else (opt.value,)
        if (arg := self.argument(name)) is not None and arg.terminated:
            return tuple(arg.values)
        return None

    def value(self, name: str) -> str | None:
        return opt.value if (opt := self.option(name)) is not None else None

    # Rendering ───────────────────────────────────────────────────────────────────────────────
    def print_help(self, file=None) -> None:
        click.echo(format_help(self), file=file, color=self.config.color)

    def print_version(self, file=None) -> None:
        click.echo(format_version(self), file=file, color=self.config.color)
