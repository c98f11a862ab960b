"""User creation backed by Postgres."""
