"""Book Connect: browse, search and preview a catalogue of books."""

__version__ = "1.0.0"
