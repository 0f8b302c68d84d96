"""
Catalog package for the book browser.

This package holds the in-memory catalogue (books, authors, genres),
the search filter, the "show more" pagination and the controller that
turns user events into rendering directives. ``router`` exposes the
controller over HTTP so a page can post its events and apply the
directives it gets back.
"""

from .router import router as catalog_router  # noqa: F401
