"""
services/clinic_service.py
--------------------------
Business-facing facade over the owner repository.
Callers (the command line, a future web layer) talk to this service
instead of issuing repository calls directly.
"""

from models.owner import Owner
from models.pet_type import PetType
from repositories.owner_repo import OwnerRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class ClinicService:
    """
    Entry point for owner lookups and maintenance.

    Responsibilities:
        - Search owners by last name and load single owners.
        - Persist new and edited owners.
        - Expose pet type reference data.
        - Render plain-text owner summaries.
    """

    def __init__(self, repo: OwnerRepository | None = None):
        self.repo = repo or OwnerRepository()

    def find_owners(self, last_name: str = "") -> list[Owner]:
        """
        Owners whose last name starts with `last_name`.
        An empty prefix lists every owner.
        """
        return self.repo.find_by_last_name(last_name.strip())

    def find_owner(self, owner_id: int) -> Owner:
        """Load one owner; raises ObjectRetrievalFailure when absent."""
        return self.repo.find_by_id(owner_id)

    def save_owner(self, owner: Owner) -> Owner:
        was_new = owner.is_new()
        self.repo.save(owner)
        logger.info(f"{'Registered' if was_new else 'Saved'} owner #{owner.id}")
        return owner

    def pet_types(self) -> list[PetType]:
        return self.repo.get_pet_types()

    @staticmethod
    def owner_summary(owner: Owner) -> str:
        """
        Multi-line description of an owner, their pets and visits.

        Example:
            #1 George Franklin | 110 W. Liberty St., Madison | 6085551023
              - Leo (cat, born 2010-09-07)
                  2013-01-01 | rabies shot
        """
        lines = [str(owner)]
        if not owner.pets:
            lines.append("  (no pets)")
        for pet in owner.sorted_pets():
            lines.append(f"  - {pet}")
            for visit in pet.sorted_visits():
                lines.append(f"      {visit}")
        return "\n".join(lines)
