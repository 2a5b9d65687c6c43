## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import click

from .types import DEFAULT_NAME, DEFAULT_VERSION, HELP_TOKENS, VERSION_TOKENS


BUILTIN_ROWS = (
    (', '.join(HELP_TOKENS), "Print this message"),
    (', '.join(VERSION_TOKENS), "Print the application version"),
)


def _option_label(opt) -> str:
    return f"{opt.name}, {opt.short}" if opt.short else opt.name

def _format_rows(rows: list[tuple[str, str]]) -> list[str]:
    # Pad before styling, ANSI escapes would otherwise skew the column width.
    width = max(len(label) for label, _ in rows) + 2
    return [f"\t{click.style(label.ljust(width), fg='blue')}{description}".rstrip() for label, description in rows]


def format_help(cli) -> str:
    name = cli.name if cli.name is not None else DEFAULT_NAME
    version = cli.version if cli.version is not None else DEFAULT_VERSION

    lines = ['',
             f"{click.style(name, fg='red', bold=True)}, {click.style('v' + version, fg='cyan', bold=True)}",
             click.style(cli.description or '', italic=True),
             '',
             click.style("Options:", fg='yellow', bold=True)]
    lines += _format_rows([*BUILTIN_ROWS, *((_option_label(o), o.description) for o in cli.options)])

    if cli.args:
        lines += ['', click.style("Arguments:", fg='yellow', bold=True)]
        lines += _format_rows([(a.manual, a.description) for a in cli.args])
    lines.append('')
    return '\n'.join(lines)

def format_version(cli) -> str:
    version = cli.version if cli.version is not None else DEFAULT_VERSION
    return click.style('v' + version, fg='blue', bold=True)
