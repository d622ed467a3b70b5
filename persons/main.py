import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from persons import database
from persons.database import init_from_env
from persons.endpoints import persons
from persons.log import configure_logging
from persons.settings import Environment, get_environment

logger = logging.getLogger(__name__)


def create_app(env: Environment) -> FastAPI:
    configure_logging(env.log_level)

    app = FastAPI(title="persons", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=env.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(persons.router)

    @app.on_event("startup")
    def startup() -> None:
        engine = init_from_env(env)
        logger.info("Connected to %s", engine.url.render_as_string(hide_password=True))

    @app.on_event("shutdown")
    def shutdown() -> None:
        database.ENGINE.dispose()

    return app


app = create_app(get_environment())


def run() -> None:
    env = get_environment()
    uvicorn.run("persons.main:app", host=env.host, port=env.port)


if __name__ == "__main__":
    run()
