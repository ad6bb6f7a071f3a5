"""dequarantine - Remove the quarantine marker from downloaded files."""

__version__ = "0.1.0"
