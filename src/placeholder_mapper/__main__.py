"""Run the placeholder mapper: python -m placeholder_mapper"""

import logging

import uvicorn

from placeholder_mapper.config import load_config

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")

config = load_config()
uvicorn.run("placeholder_mapper.app:create_app", host=config.host, port=config.port, factory=True)
