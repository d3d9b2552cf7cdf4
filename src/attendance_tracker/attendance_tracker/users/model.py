from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Domain entity: a person on the attendance roster.

    Note: Plain data object (no DB access). `code` is assigned once at
    creation and never changes.
    """

    user_id: int
    name: str
    office: str
    code: str

    def to_dict(self) -> dict:
        """Row shape used on the wire, keyed by the store's column names."""
        return {
            "id_usuarios": self.user_id,
            "nombre": self.name,
            "oficina": self.office,
            "codigo": self.code,
        }
