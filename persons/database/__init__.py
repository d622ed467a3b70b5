from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from persons.database.models import metadata
from persons.settings import Environment

ENGINE: Engine


def init_from_env(env: Environment) -> Engine:
    global ENGINE  # pylint: disable=global-statement
    if "ENGINE" in globals():
        ENGINE.dispose()
    ENGINE = create_engine(env.database_url, echo=env.database_echo, future=True, logging_name="PERSONS")
    metadata.create_all(ENGINE)
    return ENGINE
