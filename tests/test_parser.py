## argscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from argscan import parser
from argscan.errors import CliDeclarationError


@pytest.mark.parametrize("manual", ["-r, --run", "-r,--run", "  -r ,   --run  ", "\t-r,\t--run\n", "-r,\u00a0--run", "\u3000-r,--run\u2003"])
def test_paired_forms_are_trimmed(manual):
    assert parser.parse_manual(manual) == ("-r", "--run")


def test_long_only_form_has_no_short():
    assert parser.parse_manual("  --run ") == (None, "--run")


def test_short_form_may_itself_use_long_marker():
    # Only the leading `-` is checked on the short side.
    assert parser.parse_manual("--r, --run") == ("--r", "--run")


def test_short_without_marker_is_rejected():
    with pytest.raises(CliDeclarationError) as info:
        parser.parse_manual("r, --run")
    assert "short option should start with '-'" in str(info.value)
    assert info.value.part == "r"
    assert info.value.manual == "r, --run"


def test_long_without_double_marker_is_rejected():
    with pytest.raises(CliDeclarationError) as info:
        parser.parse_manual("-r, -run")
    assert "option should start with '--' (-run)" in str(info.value)
    assert info.value.part == "-run"


@pytest.mark.parametrize("manual", ["-r", "run", "", "   "])
def test_single_form_must_be_long(manual):
    with pytest.raises(CliDeclarationError, match="option should start with '--'"):
        parser.parse_manual(manual)


def test_missing_long_after_separator_is_rejected():
    with pytest.raises(CliDeclarationError, match="option should start with '--'"):
        parser.parse_manual("-r,")


def test_more_than_one_separator_is_rejected():
    with pytest.raises(CliDeclarationError, match="at most one ','"):
        parser.parse_manual("-r, --run, --go")


def test_inner_whitespace_is_kept_in_forms():
    assert parser.parse_manual("-r, --run fast") == ("-r", "--run fast")
    assert parser.parse_manual("  --run fast  ") == (None, "--run fast")


@pytest.mark.parametrize("manual", ["--help", "-h, --halt", "-v, --verbose", "-x, --version"])
def test_builtin_tokens_are_reserved(manual):
    with pytest.raises(CliDeclarationError, match="reserved"):
        parser.parse_manual(manual)


def test_declaration_error_is_a_value_error():
    with pytest.raises(ValueError):
        parser.parse_manual("nope")
