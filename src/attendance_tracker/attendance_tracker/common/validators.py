from __future__ import annotations

from typing import Any, Mapping

from ..core.constants import MAX_SQLITE_INTEGER
from ..core.exceptions import ValidationError


def require_present(data: Mapping[str, Any], field_name: str) -> str:
    """Return a required text field; empty strings are accepted as-is."""
    value = data.get(field_name)
    if value is None:
        raise ValidationError(f"El campo {field_name} es obligatorio")
    return str(value)


def require_id(value: Any, message: str = "ID obligatorio") -> int:
    """Positive integer id from an int or a string of ASCII digits.

    Floats are rejected rather than truncated, so 1.9 never means id 1.
    """
    if value is None or value == "" or value == 0:
        raise ValidationError(message)
    # bool is an int subclass
    if isinstance(value, int) and not isinstance(value, bool):
        parsed = value
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        parsed = int(value.strip())
    else:
        raise ValidationError("ID inválido")
    if parsed < 1 or parsed > MAX_SQLITE_INTEGER:
        raise ValidationError("ID inválido")
    return parsed
