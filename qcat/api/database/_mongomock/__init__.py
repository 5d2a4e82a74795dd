"""In-memory MongoDB backend backed by mongomock."""
