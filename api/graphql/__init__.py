"""GraphQL presentation layer (Strawberry)."""
