## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import lark

from .types import LONG_MARKER, SHORT_MARKER, RESERVED_TOKENS
from .errors import CliDeclarationError


# Declaration-time syntax of an option manual, e.g. `--run` or `-r, --run`.
GRAMMAR = r"""?start: paired | single
paired: SHORT "," LONG
single: LONG

// Forms may contain inner spaces, but never start or end with whitespace.
SHORT: /-(?:[^,]*[^,\s])?/
LONG: /--(?:[^,]*[^,\s])?/

// WHITESPACE
WS: /\s+/
%ignore WS
"""

_PARSER = lark.Lark(GRAMMAR, parser="earley", lexer="dynamic")


def _describe_failure(manual: str) -> tuple[str, str]:
    parts = manual.split(',')
    if len(parts) > 2:
        return f"expected at most one ',' between short and long option ({manual})", manual
    *short, long = parts
    if short and not short[0].strip().startswith(SHORT_MARKER):
        return f"short option should start with '{SHORT_MARKER}' ({short[0].strip()})", short[0].strip()
    if not long.strip().startswith(LONG_MARKER):
        return f"option should start with '{LONG_MARKER}' ({long.strip()})", long.strip()
    return f"malformed option manual ({manual})", manual


def parse_manual(manual: str) -> tuple[str | None, str]:
    """Split an option manual into its `(short, long)` forms, both trimmed.

    The short form is `None` when only the long form is given. Any malformed
    manual raises `CliDeclarationError` naming the offending text.
    """
    try:
        tree = _PARSER.parse(manual)
    except lark.exceptions.UnexpectedInput:
        message, part = _describe_failure(manual)
        raise CliDeclarationError(message, manual=manual, part=part) from None

    tokens = [str(t) for t in tree.children if isinstance(t, lark.Token)]
    short, name = (tokens[0], tokens[1]) if tree.data == 'paired' else (None, tokens[0])

    for form in (short, name):
        if form in RESERVED_TOKENS:
            raise CliDeclarationError(f"option `{form}` is reserved for built-in help and version ({manual})",
                                      manual=manual, part=form)
    return short, name
