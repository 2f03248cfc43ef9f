"""HTTP API for translation comparison."""
