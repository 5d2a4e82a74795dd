"""qcat API layer: configuration, database access, and the operation catalog."""
