## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# argscan — Declare an interface from the command line, scan tokens, and dump what was captured.
#

import sys

import click

from .types import ScanConfig
from .errors import CliDeclarationError, CliUnknownTokenError
from .cli import CLI


def _captured(cli: CLI) -> list[tuple[str, str]]:
    rows = []
    for opt in cli.options:
        rows.append((opt.name, '-' if opt.value is None else (opt.value or '(flag)')))
    for arg in cli.args:
        rows.append((arg.name, ' '.join(arg.values) if arg.terminated else '-'))
    return rows


@click.command()
@click.option('--name', default=None, help='Program name shown in the help banner.')
@click.option('--app-version', default=None, help='Version shown by --version and in the help banner.')
@click.option('--description', default=None, help='Description line shown in the help banner.')
@click.option('--option', '-o', 'options', nargs=2, multiple=True, metavar='MANUAL DESCRIPTION',
              help='Declare an option, e.g. -o "-r, --run" "Run the program".')
@click.option('--arg', '-a', 'arguments', nargs=2, multiple=True, metavar='NAME DESCRIPTION',
              help='Declare a positional argument keyword.')
@click.option('--unknown', type=click.Choice(['ignore', 'warn', 'error']), default='ignore',
              help='Policy for tokens matching no declaration.')
@click.option('--exit-on-builtin', is_flag=True, help='Stop scanning after rendering help or version.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes from all output.')
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, name, app_version, description, options, arguments,
        unknown: str, exit_on_builtin: bool, plain: bool, tokens: tuple[str, ...]) -> None:
    """Scan TOKENS (given after `--`) against the declared interface."""
    config = ScanConfig(unknown=unknown, builtins='exit' if exit_on_builtin else 'continue',
                        color=False if plain else None)
    definition = CLI(config)
    if name is not None: definition.set_name(name)
    if app_version is not None: definition.set_version(app_version)
    if description is not None: definition.set_description(description)

    try:
        for manual, help_text in options:
            definition.declare_option(manual, help_text)
        for arg_name, help_text in arguments:
            definition.declare_argument(arg_name, description=help_text)
    except CliDeclarationError as exc:
        raise click.UsageError(str(exc), ctx=ctx) from None

    try:
        definition.parse(tokens)
    except CliUnknownTokenError as exc:
        click.echo(f"{click.style(' UNKNOWN ARGUMENT. ', fg='black', bg='yellow')} {exc}", err=True, color=config.color)
        ctx.exit(1)

    for label, captured in _captured(definition):
        click.echo(f"{click.style(label, fg='blue')}\t{captured}", color=config.color)


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='argscan')


if __name__ == "__main__":
    main()
