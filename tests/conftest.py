"""
Shared fixtures: an in-memory stand-in for the psycopg2 pool so the
repositories can be exercised without a running PostgreSQL server.
"""

from datetime import date

import pytest


PET_TYPE_ROWS = [
    (5, "bird"),
    (1, "cat"),
    (2, "dog"),
    (6, "hamster"),
    (3, "lizard"),
    (4, "snake"),
]

OWNER_ROWS = [
    (1, "George", "Franklin", "110 W. Liberty St.", "Madison", "6085551023"),
    (2, "Betty", "Smith", "638 Cardinal Ave.", "Sun Prairie", "6085551749"),
    (3, "Harold", "Smithers", "563 Friendly St.", "Windsor", "6085553198"),
    (4, "Peter", "Davis", "2387 S. Fair Way", "Madison", "6085552765"),
]

# pets.id, name, birth_date, type_id, owner_id, visit_id, visit_date, description, pet_id
PET_VISIT_ROWS = [
    (1, "Leo", date(2010, 9, 7), 1, 1, 1, date(2013, 1, 1), "rabies shot", 1),
    (2, "Basil", date(2012, 8, 6), 6, 1, None, None, None, None),
    (1, "Leo", date(2010, 9, 7), 1, 1, 4, date(2013, 1, 4), "spayed", 1),
    (3, "Iggy", date(2011, 4, 17), 3, 2, 2, date(2013, 1, 2), "rabies shot", 3),
    (3, "Iggy", date(2011, 4, 17), 3, 2, 3, date(2013, 1, 3), "neutered", 3),
    (4, "Samantha", date(2012, 9, 4), 1, 2, 5, date(2013, 1, 5), "checkup", 4),
    (4, "Samantha", date(2012, 9, 4), 1, 2, 6, date(2013, 2, 5), "checkup", 4),
]


def owners_by_prefix(params):
    prefix = params[0].rstrip("%")
    return [r for r in OWNER_ROWS if r[2].startswith(prefix)]


def owner_by_id(params):
    return [r for r in OWNER_ROWS if r[0] == params[0]]


def pets_for_owner(params):
    return [r for r in PET_VISIT_ROWS if r[4] == params[0]]


class FakeCursor:
    def __init__(self, db):
        self.db = db
        self.rows = []
        self.rowcount = -1

    def execute(self, sql, params=None):
        sql = " ".join(sql.split())
        self.db.executed.append((sql, params))
        self.rows = self.db.lookup(sql, params)
        self.rowcount = len(self.rows) if self.rows else self.db.rowcount

    def fetchall(self):
        return list(self.rows)

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeConnection:
    def __init__(self, db):
        self.db = db

    def cursor(self):
        return FakeCursor(self.db)

    def commit(self):
        self.db.commits += 1

    def rollback(self):
        self.db.rollbacks += 1


class FakeDatabase:
    """
    Answers SQL by matching registered fragments against each statement.
    A registered result is a list of rows, a callable taking the bound
    parameters, or an exception instance to raise.
    """

    def __init__(self):
        self.results = {}
        self.executed = []
        self.commits = 0
        self.rollbacks = 0
        self.borrowed = 0
        self.released = 0
        self.rowcount = 0

    def on(self, fragment, result):
        self.results[fragment] = result

    def lookup(self, sql, params):
        for fragment, result in self.results.items():
            if fragment in sql:
                if isinstance(result, Exception):
                    raise result
                if callable(result):
                    result = result(params)
                return list(result)
        return []

    def get_connection(self):
        self.borrowed += 1
        return FakeConnection(self)

    def release_connection(self, conn):
        self.released += 1

    def statements(self, fragment):
        return [(sql, params) for sql, params in self.executed if fragment in sql]


@pytest.fixture
def fake_db(monkeypatch):
    """A FakeDatabase wired into every module that borrows connections."""
    import db.init_db
    import repositories.owner_repo

    fake = FakeDatabase()
    for module in (repositories.owner_repo, db.init_db):
        monkeypatch.setattr(module, "get_connection", fake.get_connection)
        monkeypatch.setattr(module, "release_connection", fake.release_connection)
    return fake


@pytest.fixture
def clinic_db(fake_db):
    """FakeDatabase preloaded with the sample owners, pets, visits and types."""
    fake_db.on("FROM owners WHERE last_name LIKE", owners_by_prefix)
    fake_db.on("FROM owners WHERE id =", owner_by_id)
    fake_db.on("LEFT OUTER JOIN visits", pets_for_owner)
    fake_db.on("FROM types ORDER BY name", PET_TYPE_ROWS)
    return fake_db
