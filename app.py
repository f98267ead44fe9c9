from __future__ import annotations

# Standard library
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Final

# Third-party
import structlog
from dotenv import load_dotenv
from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

# Local application imports
from api.graphql.context import create_context
from api.graphql.schema import create_schema
from application.bmi.commands.calculate_bmi import (
    CalculateBmiHandler,
    ProfileInputValidator,
)
from application.bmi.result_view import BmiResultViewBuilder
from infrastructure.config import (
    get_app_version,
    get_log_format,
    get_log_level,
    get_validation_ranges,
)
from infrastructure.log_config import configure_logging

load_dotenv()

configure_logging(level=get_log_level(), fmt=get_log_format())
logger = structlog.get_logger("startup")

APP_VERSION = get_app_version()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info(
        "lifespan.ready",
        version=APP_VERSION,
        ranges=str(_validator.ranges),
    )
    yield
    logger.info("lifespan.shutdown")


app = FastAPI(
    title="BMI Calculator Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


# ============================================
# GraphQL Context Setup
# ============================================

# Stateless singletons, shared across requests
_validator = ProfileInputValidator(ranges=get_validation_ranges())
_view_builder = BmiResultViewBuilder()
_calculate_bmi_handler = CalculateBmiHandler(
    validator=_validator,
    view_builder=_view_builder,
)


def get_graphql_context() -> Any:
    """Create GraphQL context with all dependencies."""
    return create_context(calculate_bmi_handler=_calculate_bmi_handler)


schema = create_schema()

graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
