"""qcat - run a catalog of named MongoDB operations against one collection."""
