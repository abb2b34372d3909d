"""Domain layer: value objects, grid contract and search results."""
