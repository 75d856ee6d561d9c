"""Infrastructure layer: configuration and observability."""
