"""API layer: GraphQL schema and resolvers."""
