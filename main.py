"""
main.py
-------
Command line entry point for the pet clinic owner database.

Commands:
    init-db               Create the schema and seed pet types.
    owners [LAST_NAME]    List owners whose last name starts with LAST_NAME.
    owner ID              Show one owner with pets and visits.
    pet-types             List pet types.
"""

import argparse
import sys

from db.connection import init_pool, close_pool
from db.init_db import create_tables, seed_pet_types
from services.clinic_service import ClinicService
from utils.exceptions import ObjectRetrievalFailure
from utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="petclinic", description="Pet clinic owner database")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="create tables and seed pet types")

    owners = sub.add_parser("owners", help="search owners by last name prefix")
    owners.add_argument("last_name", nargs="?", default="")

    owner = sub.add_parser("owner", help="show a single owner")
    owner.add_argument("owner_id", type=int)

    sub.add_parser("pet-types", help="list pet types")
    return parser


def run(args: argparse.Namespace, service: ClinicService) -> int:
    """Execute one parsed command. Returns the process exit code."""
    if args.command == "init-db":
        create_tables()
        seed_pet_types()
        print("Database initialized.")
        return 0

    if args.command == "owners":
        owners = service.find_owners(args.last_name)
        if not owners:
            print("No owners found.")
        for owner in owners:
            print(service.owner_summary(owner))
        return 0

    if args.command == "owner":
        try:
            owner = service.find_owner(args.owner_id)
        except ObjectRetrievalFailure as e:
            print(e, file=sys.stderr)
            return 1
        print(service.owner_summary(owner))
        return 0

    # pet-types
    for pet_type in service.pet_types():
        print(f"{pet_type.id}\t{pet_type.name}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, open the pool, run the command and close the pool."""
    args = build_parser().parse_args(argv)
    logger.info(f"Running command '{args.command}'")

    # ── 1. Database setup ─────────────────────────────────
    init_pool()
    try:
        # ── 2. Dispatch ───────────────────────────────────
        return run(args, ClinicService())
    finally:
        # ── 3. Cleanup ────────────────────────────────────
        close_pool()


if __name__ == "__main__":
    sys.exit(main())
