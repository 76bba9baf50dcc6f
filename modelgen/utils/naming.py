"""
Naming conventions for generated classes and files.

Table names map to model class names the way ActiveRecord expects them:
"sales_reps" -> "SalesRep", and class names map back to file stems:
"SalesRep" -> "sales_rep".
"""

import re

_IRREGULAR_SINGULARS = {
    "people": "person",
    "children": "child",
    "men": "man",
    "women": "woman",
    "data": "datum",
}

_UNCOUNTABLE = {"equipment", "information", "series", "species", "news", "status"}


def singularize(word: str) -> str:
    """
    Singularize an English table name segment.

    Examples:
        >>> singularize("customers")
        'customer'
        >>> singularize("categories")
        'category'
        >>> singularize("addresses")
        'address'
    """
    lowered = word.lower()
    if lowered in _UNCOUNTABLE:
        return word
    if lowered in _IRREGULAR_SINGULARS:
        return _IRREGULAR_SINGULARS[lowered]
    if lowered.endswith("ies") and len(word) > 3:
        return word[:-3] + "y"
    if re.search(r"(ss|sh|ch|x|z)es$", lowered):
        return word[:-2]
    if lowered.endswith("s") and not lowered.endswith("ss"):
        return word[:-1]
    return word


def camelize(name: str) -> str:
    """
    Examples:
        >>> camelize("sales_rep")
        'SalesRep'
    """
    return "".join(part[:1].upper() + part[1:] for part in re.split(r"[_\s\-\.]+", name) if part)


def underscore(name: str) -> str:
    """
    Examples:
        >>> underscore("SalesRep")
        'sales_rep'
        >>> underscore("HTTPLog")
        'http_log'
    """
    snake = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    snake = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", snake)
    return snake.replace("-", "_").replace(" ", "_").lower()


def class_name_for_table(table_name: str) -> str:
    """
    Model class name for a table, singularizing the last segment.

    Examples:
        >>> class_name_for_table("sales_reps")
        'SalesRep'
        >>> class_name_for_table("public.order_items")
        'OrderItem'
    """
    bare = table_name.split(".")[-1]
    parts = [part for part in re.split(r"[_\s\-]+", bare) if part]
    if not parts:
        raise ValueError(f"Cannot derive a class name from table name {table_name!r}")
    parts[-1] = singularize(parts[-1])
    return camelize("_".join(parts))
