"""
Literal grammar for SCSS string values.

A string matching one of these tokens can be written into SCSS source
without quoting: a hex color, a plain identifier, or a string that is
already a quoted literal.
"""
from lark import Lark
from lark.exceptions import UnexpectedInput

literal_grammar = r"""
    start: HEX_COLOR | IDENTIFIER | QUOTED_STRING

    // Longest alternative first, the lexer does not backtrack into shorter ones
    HEX_COLOR: /#([0-9a-f]{8}|[0-9a-f]{6}|[0-9a-f]{3,4})/i

    // [^ -~] is anything outside printable ASCII
    IDENTIFIER: /(-?([a-z_]|[^ -~])|--)([a-z0-9_-]|[^ -~])*/i

    QUOTED_STRING: /"([^"\\]|\\.)*"|'([^'\\]|\\.)*'/s
"""

_literal_parser = Lark(literal_grammar, parser='lalr')


def is_bare_literal(text):
    """Return True if the whole string is a single hex color, identifier or quoted string."""
    try:
        _literal_parser.parse(text)
    except UnexpectedInput:
        return False
    return True
