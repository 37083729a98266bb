"""Order records REST API."""
