from typing import Any

from sqlalchemy import MetaData, insert
from sqlalchemy.engine import Engine

from persons.database.models import persons


def insert_people(engine: Engine, *people: dict[str, Any]) -> list[int]:
    ids = []
    with engine.begin() as conn:
        for person in people:
            result = conn.execute(insert(persons).values(**person))
            ids.append(result.inserted_primary_key[0])
    return ids


def truncate_all(engine: Engine) -> None:
    meta = MetaData()
    meta.reflect(bind=engine)
    with engine.begin() as conn:
        for table in reversed(meta.sorted_tables):
            conn.execute(table.delete())
