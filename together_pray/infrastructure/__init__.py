"""Infrastructure layer: cache stores and the cache coordinator."""
