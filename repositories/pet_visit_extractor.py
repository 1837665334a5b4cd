"""
repositories/pet_visit_extractor.py
-----------------------------------
Folds the rows of the pets LEFT OUTER JOIN visits query into Pet objects
carrying their Visit lists.

Expected column order (see OwnerRepository.load_pets_and_visits):
    pets.id, name, birth_date, type_id, owner_id,
    visit_id, visit_date, description, pet_id
"""

from typing import Iterable

from models.pet import Pet
from models.visit import Visit


def extract_pets_with_visits(rows: Iterable[tuple]) -> list[Pet]:
    """
    Group joined rows under their parent pet, in the order pets first appear.

    A pet without visits shows up as a single row whose visit columns are
    NULL; it yields a Pet with an empty visit list.
    """
    pets: dict[int, Pet] = {}
    for row in rows:
        pet_id = row[0]
        pet = pets.get(pet_id)
        if pet is None:
            pet = _row_to_pet(row)
            pets[pet_id] = pet
        if row[5] is not None:
            pet.add_visit(_row_to_visit(row))
    return list(pets.values())


def _row_to_pet(row: tuple) -> Pet:
    return Pet(
        id=row[0],
        name=row[1],
        birth_date=row[2],
        type_id=row[3],
        owner_id=row[4],
    )


def _row_to_visit(row: tuple) -> Visit:
    return Visit(
        id=row[5],
        date=row[6],
        description=row[7],
        pet_id=row[8],
    )
