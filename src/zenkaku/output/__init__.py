"""Output layer: JSON, quiet, and Rich rendering of service results."""
