#!/usr/bin/env python3
"""
Create the wedplan tables.

    python -m wedplan.database_setup          # create missing tables
    python -m wedplan.database_setup --reset  # drop everything first
"""

import sys

from sqlalchemy import inspect

from .database import Base, engine, init_db


def setup_database(reset: bool = False):
    existing = set(inspect(engine).get_table_names())

    if reset and existing:
        print(f"🗑️  Dropping {len(existing)} tables...")
        Base.metadata.drop_all(bind=engine)
        existing = set()

    init_db()

    tables = sorted(Base.metadata.tables.keys())
    created = [t for t in tables if t not in existing]
    print(f"✅ {len(tables)} tables ready, {len(created)} new")
    for table in tables:
        marker = "+" if table in created else " "
        print(f"  {marker} {table}")


if __name__ == "__main__":
    setup_database(reset="--reset" in sys.argv[1:])
