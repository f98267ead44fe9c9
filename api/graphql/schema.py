"""Main GraphQL schema factory.

Usage:
    from api.graphql.schema import create_schema
    schema = create_schema()
"""

import strawberry

from api.graphql.resolvers.bmi import BmiQueries


@strawberry.type
class Query:
    @strawberry.field
    def health(self) -> str:
        return "ok"

    @strawberry.field(description="BMI calculation queries")  # type: ignore[misc]
    def bmi(self) -> BmiQueries:
        """BMI calculation and classification queries.

        Example:
            query {
              bmi {
                calculate(input: {weight: "70", height: "175", age: "30",
                                  gender: "Male"}) {
                  result { bmi categoryLabel }
                }
                categories { label rangeText }
              }
            }
        """
        return BmiQueries()


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with all resolvers.

    Returns:
        Configured Strawberry Schema instance
    """
    return strawberry.Schema(query=Query)
