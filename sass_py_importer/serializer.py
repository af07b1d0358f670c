"""
Python data to SCSS source.

Converts the decoded JSON payload of a data module into SCSS variable
declarations. Only JSON shapes are supported: None, bool, numbers, str,
lists and dicts with string keys.
"""
import json

from sass_py_importer.grammar import is_bare_literal


def to_scss_variables(data):
    """
    Turn a top-level mapping into SCSS variable declarations.

    Args:
        data: Mapping of variable names to decoded JSON values

    Returns:
        One '$name: value;' line per key, newline-joined
    """
    return "\n".join(f"${key}: {to_scss_value(value)};" for key, value in data.items())


def to_scss_value(value):
    """Serialize a single value as an SCSS literal."""
    if isinstance(value, (list, tuple)):
        return to_scss_list(value)
    if isinstance(value, dict):
        return to_scss_map(value)
    if isinstance(value, str) and is_bare_literal(value):
        return value
    return json.dumps(value, ensure_ascii=False)


def to_scss_list(values):
    # Trailing comma so that a one-element list is not read as a parenthesized scalar
    return "(" + "".join(f"{to_scss_value(value)}," for value in values) + ")"


def to_scss_map(mapping):
    entries = []
    for key, value in mapping.items():
        quoted_key = "'" + str(key).replace("'", "\\'") + "'"
        entries.append(f"{quoted_key}: {to_scss_value(value)},")
    return "(" + "".join(entries) + ")"
