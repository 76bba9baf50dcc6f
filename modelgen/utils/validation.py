"""
Input validation utilities for the model generator.

Checks identifiers and paths that arrive from the command line or from
schema files before they reach database queries or generated source.
"""

import re


class ValidationError(ValueError):
    """Raised when input validation fails."""
    pass


def sanitize_sql_identifier(identifier: str, field_name: str = "identifier") -> str:
    """
    Sanitize an SQL identifier (schema or table name).

    Args:
        identifier: The identifier to sanitize
        field_name: Name of the field (for error messages)

    Returns:
        The validated identifier (stripped of whitespace)

    Raises:
        ValidationError: If validation fails

    Examples:
        >>> sanitize_sql_identifier("customers")
        'customers'
        >>> sanitize_sql_identifier("orders; DROP TABLE orders;")  # doctest: +SKIP
        ValidationError: identifier contains invalid characters
    """
    if not identifier or not isinstance(identifier, str):
        raise ValidationError(f"{field_name} must be a non-empty string")

    identifier = identifier.strip()

    # Letters, digits and underscores; must not start with a digit
    if not re.match(r'^[a-zA-Z_][a-zA-Z0-9_]*$', identifier):
        raise ValidationError(
            f"{field_name} contains invalid characters. "
            "SQL identifiers must start with a letter or underscore and contain only "
            "alphanumeric characters and underscores."
        )

    if len(identifier) > 63:  # PostgreSQL limit
        raise ValidationError(f"{field_name} exceeds PostgreSQL maximum length of 63 characters")

    return identifier


def validate_class_name(class_name: str, field_name: str = "class_name") -> str:
    """
    Validate a Ruby class name for the generated model.

    Examples:
        >>> validate_class_name("Customer")
        'Customer'
        >>> validate_class_name("customer")  # doctest: +SKIP
        ValidationError: class_name must be a CamelCase constant name
    """
    if not class_name or not isinstance(class_name, str):
        raise ValidationError(f"{field_name} must be a non-empty string")

    class_name = class_name.strip()

    if not re.match(r'^[A-Z][A-Za-z0-9]*$', class_name):
        raise ValidationError(
            f"{field_name} must be a CamelCase constant name "
            f"(an uppercase letter followed by letters and digits), got '{class_name}'"
        )

    return class_name


def validate_file_path(file_path: str, field_name: str = "file_path") -> str:
    """
    Validate a file path for security.

    Args:
        file_path: The file path to validate
        field_name: Name of the field (for error messages)

    Returns:
        The validated file path (stripped of whitespace)

    Raises:
        ValidationError: If validation fails
    """
    if not file_path or not isinstance(file_path, str):
        raise ValidationError(f"{field_name} must be a non-empty string")

    file_path = file_path.strip()

    if not file_path:
        raise ValidationError(f"{field_name} cannot be empty or whitespace-only")

    if ".." in file_path.replace("\\", "/").split("/"):
        raise ValidationError(f"{field_name} contains path traversal characters (..)")

    if "\x00" in file_path:
        raise ValidationError(f"{field_name} contains null bytes")

    if len(file_path) > 4096:  # Linux PATH_MAX
        raise ValidationError(f"{field_name} exceeds maximum length of 4096 characters")

    return file_path
