"""
Ruby literal helpers shared by the model and test renderers.
"""

import re

_BARE_SYMBOL_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*[?!]?$")


def ruby_string(value: str) -> str:
    """Double-quoted Ruby string literal with interpolation disabled."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("#{", "\\#{")
    return f'"{escaped}"'


def is_bare_identifier(name: str) -> bool:
    return bool(_BARE_SYMBOL_RE.match(name))


def ruby_symbol(name: str) -> str:
    """
    Ruby symbol literal, quoted when the name is not a bare identifier.

    Examples:
        >>> ruby_symbol("email")
        ':email'
        >>> ruby_symbol("first name")
        ':"first name"'
    """
    if _BARE_SYMBOL_RE.match(name):
        return f":{name}"
    return f":{ruby_string(name)}"


def ruby_options(pairs: list[tuple[str, str]]) -> str:
    """Render option pairs as hash-rocket arguments: ":a => 1, :b => 2"."""
    return ", ".join(f"{ruby_symbol(key)} => {value}" for key, value in pairs)


def ruby_hash(pairs: list[tuple[str, str]]) -> str:
    """Render option pairs as an inline hash: "{ :a => 1 }"."""
    return "{ " + ruby_options(pairs) + " }"


def ruby_number(literal: str) -> str:
    """
    Ruby numeric literal for a bound digit string.

    Ruby rejects a bare leading decimal point, so fraction-only bounds get a zero.

    Examples:
        >>> ruby_number(".99")
        '0.99'
        >>> ruby_number("-.99")
        '-0.99'
        >>> ruby_number("999.99")
        '999.99'
    """
    if literal.startswith("-."):
        return "-0" + literal[1:]
    if literal.startswith("."):
        return "0" + literal
    return literal
