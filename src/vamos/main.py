"""Entry: create the catalog schema and start the API server."""

import logging

import uvicorn

from vamos.config import API_HOST, API_PORT, DB_PATH, LOG_LEVEL
from vamos.db.session import init_db


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s: %(message)s")
    init_db(DB_PATH)
    uvicorn.run("vamos.api.app:app", host=API_HOST, port=API_PORT)


if __name__ == "__main__":
    main()
