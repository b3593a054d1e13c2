"""Domain layer - entities, value objects, rules."""
