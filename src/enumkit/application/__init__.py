"""Application layer: factories and reporters built on the domain model."""
