"""PokeAPI ingestion: rate-limited fetching, field mapping and idempotent upserts."""
