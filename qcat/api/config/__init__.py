"""Config API module."""
