"""Application layer: ports consumed by the prefixed logger core."""
