"""BMI GraphQL resolvers."""

from api.graphql.resolvers.bmi.queries import BmiQueries

__all__ = [
    "BmiQueries",
]
