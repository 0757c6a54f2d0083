"""Pokédex service: PokeAPI seeding plus read-only list/detail endpoints."""

__version__ = "0.1.0"
