"""
repositories/owner_repo.py
--------------------------
Data access layer for owners and the pets/visits hanging off them.
All SQL queries touching the `owners` table live here, plus the joined
pets/visits fetch and the pet type lookup used to hydrate pets.
"""

from db.connection import get_connection, release_connection
from models.owner import Owner
from models.pet_type import PetType
from repositories.pet_visit_extractor import extract_pets_with_visits
from utils.entity_utils import get_by_id
from utils.exceptions import ObjectRetrievalFailure
from utils.logger import get_logger

logger = get_logger(__name__)

_OWNER_COLUMNS = "id, first_name, last_name, address, city, telephone"


class OwnerRepository:
    """Repository for owners, with their pets and visits loaded eagerly."""

    # ── READ ──────────────────────────────────────────────

    def find_by_last_name(self, last_name: str) -> list[Owner]:
        """
        Fetch every owner whose last name starts with `last_name`,
        together with their pets and visits.

        Returns:
            List of Owner objects; empty when nothing matches.
        """
        sql = f"SELECT {_OWNER_COLUMNS} FROM owners WHERE last_name LIKE %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (last_name + "%",))
                owners = [self._row_to_owner(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)
        logger.debug(f"Found {len(owners)} owner(s) for last name prefix '{last_name}'")
        self._load_owners_pets_and_visits(owners)
        return owners

    def find_by_id(self, owner_id: int) -> Owner:
        """
        Fetch a single owner by primary key, with pets and visits.

        Raises:
            ObjectRetrievalFailure: If no owner has this id.
        """
        sql = f"SELECT {_OWNER_COLUMNS} FROM owners WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (owner_id,))
                row = cur.fetchone()
        finally:
            release_connection(conn)
        if row is None:
            logger.debug(f"No owner with id {owner_id}")
            raise ObjectRetrievalFailure(Owner, owner_id)
        logger.debug(f"Found owner #{owner_id}")
        owner = self._row_to_owner(row)
        self.load_pets_and_visits(owner)
        return owner

    def load_pets_and_visits(self, owner: Owner) -> None:
        """
        Load all pets of `owner` and their visits in one joined query,
        resolve each pet's type and attach the pets to the owner.

        Raises:
            ObjectRetrievalFailure: If a pet references an unknown type id.
        """
        sql = """
            SELECT pets.id, name, birth_date, type_id, owner_id,
                   visits.id AS visit_id, visit_date, description, pet_id
            FROM pets LEFT OUTER JOIN visits ON pets.id = pet_id
            WHERE owner_id = %s;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (owner.id,))
                pets = extract_pets_with_visits(cur.fetchall())
        finally:
            release_connection(conn)
        logger.debug(f"Loaded {len(pets)} pet(s) for owner #{owner.id}")

        pet_types = self.get_pet_types()
        for pet in pets:
            pet.type = get_by_id(pet_types, PetType, pet.type_id)
            owner.add_pet(pet)

    def get_pet_types(self) -> list[PetType]:
        """Fetch all pet types ordered by name."""
        sql = "SELECT id, name FROM types ORDER BY name;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [PetType(id=r[0], name=r[1]) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    # ── CREATE / UPDATE ───────────────────────────────────

    def save(self, owner: Owner) -> None:
        """
        Insert a new owner or update an existing one.

        A new owner (no id) is inserted and receives the generated key.
        An existing owner has all scalar fields overwritten; pets and
        visits are not touched.
        """
        if owner.is_new():
            self._insert(owner)
        else:
            self._update(owner)

    def _insert(self, owner: Owner) -> None:
        sql = """
            INSERT INTO owners (first_name, last_name, address, city, telephone)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING id;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (
                    owner.first_name, owner.last_name, owner.address,
                    owner.city, owner.telephone,
                ))
                new_id = cur.fetchone()[0]
            conn.commit()
            owner.id = new_id
            logger.info(f"Added owner #{owner.id} ({owner.full_name})")
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add owner {owner.full_name}: {e}")
            raise
        finally:
            release_connection(conn)

    def _update(self, owner: Owner) -> None:
        sql = """
            UPDATE owners
            SET first_name = %s, last_name = %s, address = %s, city = %s, telephone = %s
            WHERE id = %s;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (
                    owner.first_name, owner.last_name, owner.address,
                    owner.city, owner.telephone, owner.id,
                ))
            conn.commit()
            logger.info(f"Updated owner #{owner.id}")
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to update owner #{owner.id}: {e}")
            raise
        finally:
            release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    def _load_owners_pets_and_visits(self, owners: list[Owner]) -> None:
        for owner in owners:
            self.load_pets_and_visits(owner)

    @staticmethod
    def _row_to_owner(row: tuple) -> Owner:
        """Convert an owners row tuple to an Owner domain object."""
        return Owner(
            id=row[0],
            first_name=row[1],
            last_name=row[2],
            address=row[3],
            city=row[4],
            telephone=row[5],
        )
