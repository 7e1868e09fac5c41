"""A tile-based puzzle game: collect every coin, then reach the exit, with map checks and small helper modules."""

__version__ = "1.0.0"