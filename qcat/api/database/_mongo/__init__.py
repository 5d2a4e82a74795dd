"""MongoDB backend."""
