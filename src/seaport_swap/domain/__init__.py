"""Order building and submission domain."""
