"""
One SQL statement per operation against the ``persons`` table.

Every method borrows a connection from the engine for the duration of a
single statement and gives back a ``Result`` instead of raising, so the
HTTP layer has exactly one place where failures become status codes.
"""
import logging
from typing import Any, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import SQLAlchemyError

from persons.database.models import persons
from persons.models import Person
from persons.result import Ok, Result, not_found, storage_failure

logger = logging.getLogger(__name__)

# sqlite3 raises a bare OverflowError for integers it cannot bind, SQLAlchemy does not wrap it
STORAGE_ERRORS = (SQLAlchemyError, OverflowError)


def row_to_person(row: Row[Any]) -> Person:
    return Person(**row._mapping)


class PersonService:
    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def list_all(self) -> Result[list[Person]]:
        try:
            with self.engine.begin() as conn:
                rows = conn.execute(select(persons)).all()
        except STORAGE_ERRORS as exc:
            logger.exception("Failed to list persons")
            return storage_failure(exc)
        return Ok([row_to_person(row) for row in rows])

    def get(self, person_id: int) -> Result[Person]:
        try:
            with self.engine.begin() as conn:
                row = conn.execute(select(persons).where(persons.c.id == person_id)).first()
        except STORAGE_ERRORS as exc:
            logger.exception("Failed to get person %s", person_id)
            return storage_failure(exc)
        if row is None:
            return not_found()
        return Ok(row_to_person(row))

    def search(self, name: Optional[str]) -> Result[list[Person]]:
        # a missing name turns into "%%", which matches every row
        pattern = f"%{name or ''}%"
        try:
            with self.engine.begin() as conn:
                rows = conn.execute(select(persons).where(persons.c.name.like(pattern))).all()
        except STORAGE_ERRORS as exc:
            logger.exception("Failed to search persons by name %r", name)
            return storage_failure(exc)
        return Ok([row_to_person(row) for row in rows])

    def create(self, person: Person) -> Result[Person]:
        try:
            with self.engine.begin() as conn:
                result = conn.execute(insert(persons).values(name=person.name, age=person.age))
                person_id = result.inserted_primary_key[0]
        except STORAGE_ERRORS as exc:
            logger.exception("Failed to create person")
            return storage_failure(exc)
        logger.info("Created person %s", person_id)
        return Ok(person.model_copy(update=dict(id=person_id)))

    def update(self, person_id: int, person: Person) -> Result[Person]:
        stmt = update(persons).where(persons.c.id == person_id).values(name=person.name, age=person.age)
        try:
            with self.engine.begin() as conn:
                rowcount = conn.execute(stmt).rowcount
        except STORAGE_ERRORS as exc:
            logger.exception("Failed to update person %s", person_id)
            return storage_failure(exc)
        if rowcount == 0:
            return not_found()
        logger.info("Updated person %s", person_id)
        # echoes what the client sent, the row is not read back
        return Ok(person.model_copy(update=dict(id=person_id)))

    def delete(self, person_id: int) -> Result[None]:
        try:
            with self.engine.begin() as conn:
                rowcount = conn.execute(delete(persons).where(persons.c.id == person_id)).rowcount
        except STORAGE_ERRORS as exc:
            logger.exception("Failed to delete person %s", person_id)
            return storage_failure(exc)
        if rowcount == 0:
            return not_found()
        logger.info("Deleted person %s", person_id)
        return Ok(None)
