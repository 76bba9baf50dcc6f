"""
Error-message vocabulary shared by the model renderers and the test deriver.

Generated models and generated tests must agree on every message, so both
sides look messages up here instead of spelling them out.
"""

from typing import Any

# rule kind -> message key -> template
MESSAGE_TEMPLATES: dict[str, dict[str, str]] = {
    "presence": {
        "blank": "can't be blank",
    },
    "length_limit": {
        "too_long": "is too long (maximum is {maximum} characters)",
    },
    "format": {
        "invalid": "is not a string",
    },
    "numeric_range": {
        "not_a_number": "is not a number",
        "less_than_or_equal_to": "must be less than or equal to {bound}",
        "greater_than_or_equal_to": "must be greater than or equal to {bound}",
    },
}

DEFAULT_MESSAGE_KEYS = {
    "presence": "blank",
    "length_limit": "too_long",
    "format": "invalid",
    "numeric_range": "not_a_number",
}


def message_for(kind: str, key: str | None = None, **params: Any) -> str:
    """
    Look up and format the message for a rule kind.

    Args:
        kind: Rule kind ("presence", "length_limit", "format", "numeric_range")
        key: Message key within the kind (defaults to the kind's primary message)
        **params: Values substituted into the template

    Returns:
        The formatted message

    Raises:
        KeyError: If the kind or key is not registered
    """
    templates = MESSAGE_TEMPLATES[kind]
    template = templates[key or DEFAULT_MESSAGE_KEYS[kind]]
    return template.format(**params)
