"""HTTP layer for the tool catalog service."""
