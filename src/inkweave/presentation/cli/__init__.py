"""Console presentation layer."""
