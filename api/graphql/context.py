"""GraphQL context factory for dependency injection."""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from application.bmi.commands.calculate_bmi import CalculateBmiHandler


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    Resolvers access dependencies using `info.context.get("name")`.

    Attributes:
        calculate_bmi_handler: Handler for BMI calculation commands
        request: FastAPI request object
    """

    def __init__(
        self,
        calculate_bmi_handler: CalculateBmiHandler,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.calculate_bmi_handler = calculate_bmi_handler
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name.

        Args:
            key: Dependency name (e.g., "calculate_bmi_handler")

        Returns:
            Dependency instance or None if not found
        """
        return getattr(self, key, None)


def create_context(
    calculate_bmi_handler: CalculateBmiHandler,
    request: Optional[Request] = None,
) -> GraphQLContext:
    """Create GraphQL context with all dependencies.

    Example:
        >>> context = create_context(
        ...     calculate_bmi_handler=CalculateBmiHandler(
        ...         validator=ProfileInputValidator(),
        ...         view_builder=BmiResultViewBuilder(),
        ...     ),
        ... )
    """
    return GraphQLContext(
        calculate_bmi_handler=calculate_bmi_handler,
        request=request,
    )
