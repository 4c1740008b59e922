"""Users service: HTTP API over a single Postgres users table."""
