"""
db/init_db.py
-------------
Creates the clinic schema if it does not already exist and seeds the
pet type reference data.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Pet types: small reference table looked up by id when pets are loaded
CREATE TABLE IF NOT EXISTS types (
    id              SERIAL PRIMARY KEY,
    name            VARCHAR(80) UNIQUE NOT NULL
);

-- Owners: the aggregate root handled by OwnerRepository
CREATE TABLE IF NOT EXISTS owners (
    id              SERIAL PRIMARY KEY,
    first_name      VARCHAR(30),
    last_name       VARCHAR(30),
    address         VARCHAR(255),
    city            VARCHAR(80),
    telephone       VARCHAR(20)
);

CREATE TABLE IF NOT EXISTS pets (
    id              SERIAL PRIMARY KEY,
    name            VARCHAR(30),
    birth_date      DATE,
    type_id         INT NOT NULL REFERENCES types(id),
    owner_id        INT REFERENCES owners(id)
);

CREATE TABLE IF NOT EXISTS visits (
    id              SERIAL PRIMARY KEY,
    pet_id          INT NOT NULL REFERENCES pets(id),
    visit_date      DATE,
    description     VARCHAR(255)
);

CREATE INDEX IF NOT EXISTS idx_owners_last_name ON owners(last_name);
CREATE INDEX IF NOT EXISTS idx_pets_owner ON pets(owner_id);
CREATE INDEX IF NOT EXISTS idx_visits_pet ON visits(pet_id);
"""

PET_TYPES = ("cat", "dog", "lizard", "snake", "bird", "hamster")


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        release_connection(conn)


def seed_pet_types(names: tuple[str, ...] = PET_TYPES) -> int:
    """
    Insert the standard pet types, skipping any that already exist.

    Returns:
        Number of types actually inserted.
    """
    sql = "INSERT INTO types (name) VALUES (%s) ON CONFLICT (name) DO NOTHING;"
    conn = get_connection()
    try:
        inserted = 0
        with conn.cursor() as cur:
            for name in names:
                cur.execute(sql, (name,))
                inserted += cur.rowcount
        conn.commit()
        logger.info(f"Seeded {inserted} pet type(s).")
        return inserted
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to seed pet types: {e}")
        raise
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool, close_pool
    init_pool()
    try:
        create_tables()
        seed_pet_types()
    finally:
        close_pool()
    print("Database schema created successfully.")
