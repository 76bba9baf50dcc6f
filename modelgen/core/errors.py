"""
Exceptions raised while turning table metadata into generated artifacts.

ConfigurationError and PreconditionViolation abort a generation run before any
artifact is produced. UnsupportedDataType is raised per column and handled by
the derivers, which skip the column and carry on.
"""


class GenerationError(Exception):
    """Base class for all generation failures."""


class ConfigurationError(GenerationError):
    """Raised for an unknown dialect or an unusable schema configuration."""


class PreconditionViolation(GenerationError):
    """Raised when a column descriptor or bound input is structurally invalid."""

    def __init__(self, field_name: str, message: str):
        self.field_name = field_name
        self.message = message
        super().__init__(f"{field_name}: {message}")


class UnsupportedDataType(GenerationError):
    """Raised when a column belongs to a family no rule or assertion covers."""

    def __init__(self, column_name: str, family: str, data_type: str = ""):
        self.column_name = column_name
        self.family = family
        self.data_type = data_type
        super().__init__(
            f"Column '{column_name}' has unsupported data type "
            f"'{data_type or family}' (family: {family})"
        )
