"""
models/pet_type.py
------------------
Reference data: the kind of animal a pet is (cat, dog, ...).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class PetType:
    """A named pet type row from the `types` table."""
    name: str
    id: Optional[int] = None

    def is_new(self) -> bool:
        return self.id is None

    def __str__(self) -> str:
        return self.name
