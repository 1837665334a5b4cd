"""
models/visit.py
---------------
Domain model for a single trip of a pet to the clinic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from models.pet import Pet


@dataclass
class Visit:
    """
    Represents one visit of a pet.

    Attributes:
        id: Database primary key (None for new records).
        date: Day of the visit.
        description: Free text written by the vet.
        pet_id: Stored foreign key of the visited pet.
        pet: Back reference set by `Pet.add_visit`.
    """
    date: Optional[date] = field(default_factory=date.today)
    description: Optional[str] = None
    pet_id: Optional[int] = None
    id: Optional[int] = None
    pet: Optional[Pet] = field(default=None, repr=False, compare=False)

    def is_new(self) -> bool:
        return self.id is None

    def __str__(self) -> str:
        return f"{self.date} | {self.description or ''}"
