"""
models/owner.py
---------------
Domain model for a pet owner, the root of the owner/pet/visit graph.
"""

from dataclasses import dataclass, field
from typing import Optional

from models.pet import Pet


@dataclass
class Owner:
    """
    Represents a clinic customer.

    Attributes:
        id: Database primary key. None until the first save assigns it.
        first_name: Given name.
        last_name: Family name, used for prefix searches.
        address: Street address.
        city: City of residence.
        telephone: Contact number.
        pets: Pets owned, in the order they were attached.
    """
    first_name: str
    last_name: str
    address: Optional[str] = None
    city: Optional[str] = None
    telephone: Optional[str] = None
    id: Optional[int] = None
    pets: list[Pet] = field(default_factory=list)

    def is_new(self) -> bool:
        """True while the owner has never been saved."""
        return self.id is None

    def add_pet(self, pet: Pet) -> None:
        """Attach a pet to this owner and point it back here."""
        pet.owner = self
        if self.id is not None:
            pet.owner_id = self.id
        self.pets.append(pet)

    def get_pet(self, name: str, ignore_new: bool = False) -> Optional[Pet]:
        """
        Find a pet by name, ignoring case.

        Args:
            name: Pet name to look for.
            ignore_new: Skip pets that have not been saved yet.

        Returns:
            The matching Pet or None.
        """
        wanted = name.lower()
        for pet in self.pets:
            if ignore_new and pet.is_new():
                continue
            if pet.name is not None and pet.name.lower() == wanted:
                return pet
        return None

    def sorted_pets(self) -> list[Pet]:
        """Pets ordered by name; unnamed pets sort first."""
        return sorted(self.pets, key=lambda p: (p.name or "").lower())

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return f"#{self.id} {self.full_name} | {self.address}, {self.city} | {self.telephone}"
