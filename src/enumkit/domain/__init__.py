"""Domain layer: enum model, naming conventions, exceptions."""
