"""Infrastructure layer: configuration, API models and factories."""
