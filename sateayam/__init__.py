"""MongoDB storage, price formatting and Flask category and home pages for a shop catalogue."""

__version__ = "0.1.0"