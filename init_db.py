# init_db.py

import logging

from app.db.session import Base, engine
from app.db import models  # noqa: F401  registers every mapped table


def init():
    logging.info("Creating tables (if not exist)...")
    Base.metadata.create_all(bind=engine)
    logging.info("Done.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init()
