"""Core editing model: geometry, entities, builders and the shape layer."""
