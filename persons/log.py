import logging

FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if root.handlers:
        # already configured, e.g. by uvicorn or pytest
        return
    logging.basicConfig(level=level.upper(), format=FORMAT)
