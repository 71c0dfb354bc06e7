"""Domain enums shared by schemas, catalog data, and the matching engine."""
