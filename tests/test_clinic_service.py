from datetime import date

import pytest

from models.owner import Owner
from models.pet import Pet
from models.pet_type import PetType
from models.visit import Visit
from services.clinic_service import ClinicService
from utils.exceptions import ObjectRetrievalFailure


@pytest.fixture
def service(clinic_db):
    return ClinicService()


def test_find_owners_strips_prefix(service, clinic_db):
    owners = service.find_owners("  Smith ")

    assert [o.last_name for o in owners] == ["Smith", "Smithers"]
    assert clinic_db.statements("last_name LIKE")[0][1] == ("Smith%",)


def test_find_owners_without_prefix_lists_everyone(service):
    assert len(service.find_owners()) == 4


def test_find_owner_propagates_not_found(service):
    with pytest.raises(ObjectRetrievalFailure):
        service.find_owner(404)


def test_save_owner_returns_saved_owner(service, clinic_db):
    clinic_db.on("INSERT INTO owners", [(11,)])
    owner = Owner(first_name="Carlos", last_name="Estaban")

    saved = service.save_owner(owner)

    assert saved is owner
    assert saved.id == 11


def test_pet_types(service):
    assert [t.name for t in service.pet_types()][:2] == ["bird", "cat"]


def test_owner_summary_lists_pets_and_visits():
    owner = Owner(id=1, first_name="George", last_name="Franklin",
                  address="110 W. Liberty St.", city="Madison", telephone="6085551023")
    pet = Pet(name="Leo", id=1, birth_date=date(2010, 9, 7), type=PetType(id=1, name="cat"))
    owner.add_pet(pet)
    pet.add_visit(Visit(id=1, date=date(2013, 1, 1), description="rabies shot"))

    summary = ClinicService.owner_summary(owner)

    assert summary.splitlines() == [
        "#1 George Franklin | 110 W. Liberty St., Madison | 6085551023",
        "  - Leo (cat, born 2010-09-07)",
        "      2013-01-01 | rabies shot",
    ]


def test_owner_summary_without_pets():
    owner = Owner(id=4, first_name="Peter", last_name="Davis")

    assert ClinicService.owner_summary(owner).endswith("(no pets)")
