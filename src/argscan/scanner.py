## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# argscan — Single pass, left-to-right scanner with one token of lookahead.
#

import sys
from typing import Sequence

import click

from .types import HELP_TOKENS, VERSION_TOKENS, ScanConfig, looks_like_option
from .errors import CliUnknownTokenError


def _after_builtin(config: ScanConfig) -> None:
    if config.builtins == 'exit': sys.exit(0)

def _unknown_token(config: ScanConfig, token: str, position: int) -> None:
    if config.unknown == 'ignore': return
    detail = f"Token `{token}` at position {position} matches no declared option or argument."
    if config.unknown == 'error':
        raise CliUnknownTokenError(detail, token=token, position=position)
    click.echo(f"{click.style(' UNKNOWN ARGUMENT. ', fg='black', bg='yellow')} {detail}", err=True, color=config.color)


def scan(cli, tokens: Sequence[str]) -> None:
    """Match each token against built-ins, then options, then positionals.

    Options take the following token as their value unless it starts with `-`.
    Positionals take every following token up to the next one starting with `-`.
    """
    tokens = list(tokens)
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1

        if token in HELP_TOKENS:
            cli.print_help()
            _after_builtin(cli.config)
            continue
        if token in VERSION_TOKENS:
            cli.print_version()
            _after_builtin(cli.config)
            continue

        if (opt := next((o for o in cli.options if o.matches(token)), None)) is not None:
            opt.value = ''
            if index < len(tokens) and not looks_like_option(tokens[index]):
                opt.value = tokens[index]
                index += 1
            continue

        if (arg := next((a for a in cli.args if a.name == token), None)) is not None:
            while index < len(tokens) and not looks_like_option(tokens[index]):
                arg.values.append(tokens[index])
                index += 1
            arg.terminated = True
            continue

        _unknown_token(cli.config, token, index - 1)
