from typing import Iterator

from fastapi.testclient import TestClient
from pytest import fixture
from sqlalchemy.engine import Engine

from persons import database
from persons.database.models import metadata
from persons.endpoints.persons import get_service
from persons.main import create_app
from persons.service import PersonService
from tests.settings import Environment
from tests.utils import truncate_all


@fixture(name="env", scope="session")
def _env() -> Environment:
    return Environment()


@fixture(name="init_database", scope="session")
def _init_database(env: Environment) -> Iterator[Engine]:
    engine = database.init_from_env(env)
    yield engine
    engine.dispose()


@fixture(name="production_engine", scope="function")
def _production_engine(init_database: Engine) -> Iterator[Engine]:
    # some tests drop the table to provoke storage failures
    metadata.create_all(init_database)
    yield init_database
    truncate_all(init_database)


@fixture(name="service", scope="function")
def _service(production_engine: Engine) -> PersonService:
    return PersonService(production_engine)


@fixture(name="client", scope="function")
def _client(env: Environment, service: PersonService) -> Iterator[TestClient]:
    app = create_app(env)
    app.dependency_overrides[get_service] = lambda: service
    with TestClient(app) as client:
        yield client
