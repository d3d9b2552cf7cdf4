"""Access code generation."""
from __future__ import annotations

import secrets
from typing import Callable, Sequence

from ..core.constants import CODE_ALPHABET, CODE_LENGTH

Chooser = Callable[[Sequence[str]], str]


def generate_code(choice: Chooser = secrets.choice, *, length: int = CODE_LENGTH) -> str:
    """Random base-36 code of `length` characters, uppercased."""
    return "".join(choice(CODE_ALPHABET) for _ in range(length)).upper()
