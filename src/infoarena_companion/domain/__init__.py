"""Domain layer: task models, builder and parsing errors."""
