"""Database API module: one backend-neutral handle per collection."""
