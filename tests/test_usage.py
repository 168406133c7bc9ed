import pytest

from remotecache.usage import (
    DEFAULT_WIDTH,
    HELP_TITLE,
    MINIMUM_WIDTH,
    Flag,
    console_width,
    format_help,
    wrap,
    wrap_line,
)

FOX = "the quick brown fox jumped over the lazy dog"


def test_wrap_line_narrow():
    expected = "the\n__quick\n__brown\n__fox\n__jumped\n__over the\n__lazy dog"
    assert wrap_line(FOX, 10, "__") == expected


def test_wrap_line_wide_enough():
    assert wrap_line(FOX, 50, "__") == FOX


def test_wrap_line_cannot_wrap():
    assert wrap_line(FOX, 2, "__") == FOX


def test_wrap_line_whitespace_only():
    text = " " * 40
    assert wrap_line(text, 10, "") == text


def test_wrap_multiline():
    text = (
        "the quick brown fox jumped over the lazy dog\n"
        "the second line is even longer than the first, with some super important\n"
        "information that overflows\n"
        "and finally a fourth line with some gibberish"
    )
    expected = (
        "the quick brown fox\n"
        "  jumped over the lazy\n"
        "  dog\n"
        "  the second line is even\n"
        "  longer than the first,\n"
        "  with some super\n"
        "  important\n"
        "  information that\n"
        "  overflows\n"
        "  and finally a fourth\n"
        "  line with some\n"
        "  gibberish"
    )
    assert wrap(text, 2, 25) == expected


def _flags():
    return [
        Flag(
            "foo",
            usage="you really should specify this value, otherwise some terrible things will happen",
            value="42",
            env_vars=("FOO",),
        ),
        Flag(
            "bar",
            usage="this is another flag with a description long enough to test the wrapping",
            value=1,
            env_vars=("BAR",),
        ),
    ]


EXPECTED_HELP = (
    HELP_TITLE
    + "\n\nUSAGE:\n   cli.test [options]\n\nOPTIONS:\n"
    "   --foo value you really should\n"
    "      specify this value, otherwise\n"
    "      some terrible things will\n"
    '      happen (default: "42") [$FOO]\n'
    "\n"
    "   --bar value this is another\n"
    "      flag with a description long\n"
    "      enough to test the wrapping\n"
    "      (default: 1) [$BAR]\n"
    "\n"
    "   --help, -h  show help\n"
)


def test_format_help_explicit_width():
    assert format_help("cli.test", _flags(), 35) == EXPECTED_HELP


def test_format_help_from_columns(monkeypatch):
    monkeypatch.setenv("COLUMNS", "35")
    assert format_help("cli.test", _flags()) == EXPECTED_HELP


def test_flag_string_with_string_default():
    flag = Flag("dir", usage="Where to store.", value="x", env_vars=("A", "B"))
    assert str(flag) == '--dir value\tWhere to store. (default: "x") [$A, $B]'


def test_flag_string_empty_string_has_no_default():
    assert str(Flag("dir", usage="Path.", value="")) == "--dir value\tPath."


def test_bool_flag_with_default_text():
    flag = Flag("s3.disable_ssl", usage="Disable.", value=False, default_text="false, ie on")
    assert str(flag) == "--s3.disable_ssl\tDisable. (default: false, ie on)"


def test_flag_backtick_placeholder():
    flag = Flag("prefix", usage="Prefix with `NAME` or not", value=False, show_default=False)
    assert str(flag) == "--prefix\tPrefix with NAME or not"


@pytest.mark.parametrize("columns, expected", [("100", 100), ("20", MINIMUM_WIDTH), (" 50 ", 50)])
def test_console_width_from_columns(monkeypatch, columns, expected):
    monkeypatch.setenv("COLUMNS", columns)
    assert console_width() == expected


def test_console_width_fallback_is_bounded(monkeypatch):
    monkeypatch.setenv("COLUMNS", "not-a-number")
    width = console_width()
    assert MINIMUM_WIDTH <= width <= max(DEFAULT_WIDTH, width)
    assert width >= MINIMUM_WIDTH