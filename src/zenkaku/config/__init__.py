"""Configuration layer: settings sources, section models, and logging setup."""
