# bookconnect/main.py
import logging

from fastapi import FastAPI

from . import __version__
from .catalog import catalog_router
from .config import Config

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Book Connect",
    description=(
        "Catalogue browser: paginated book list, search by title, author "
        "and genre, book preview and day/night theme."
    ),
    version=__version__,
)
app.include_router(catalog_router)


@app.get("/")
def health_check():
    return {"status": "ok", "message": "Book Connect is running"}
