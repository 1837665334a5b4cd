"""
models/pet.py
-------------
Domain model for a pet and its visit history.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Optional

from models.pet_type import PetType
from models.visit import Visit

if TYPE_CHECKING:
    from models.owner import Owner


@dataclass
class Pet:
    """
    Represents a pet belonging to an owner.

    Attributes:
        id: Database primary key (None for new records).
        name: The pet's name.
        birth_date: Date of birth, if known.
        type_id: Stored foreign key into the `types` table.
        owner_id: Stored foreign key into the `owners` table.
        type: The resolved PetType (filled in by the repository).
        owner: Back reference set by `Owner.add_pet`.
        visits: Visits in the order they were attached.
    """
    name: Optional[str]
    birth_date: Optional[date] = None
    type_id: Optional[int] = None
    owner_id: Optional[int] = None
    id: Optional[int] = None
    type: Optional[PetType] = None
    owner: Optional[Owner] = field(default=None, repr=False, compare=False)
    visits: list[Visit] = field(default_factory=list)

    def is_new(self) -> bool:
        return self.id is None

    def add_visit(self, visit: Visit) -> None:
        """Attach a visit to this pet and point it back here."""
        visit.pet = self
        if self.id is not None:
            visit.pet_id = self.id
        self.visits.append(visit)

    def sorted_visits(self) -> list[Visit]:
        """Visits ordered most recent first; undated visits go last."""
        dated = [v for v in self.visits if v.date is not None]
        undated = [v for v in self.visits if v.date is None]
        return sorted(dated, key=lambda v: v.date, reverse=True) + undated

    def __str__(self) -> str:
        kind = self.type.name if self.type else "unknown"
        return f"{self.name or '(unnamed)'} ({kind}, born {self.birth_date or '?'})"
