"""Application entry point and composition root."""

import logging

from roleguard import __version__
from roleguard.config import Settings, get_settings
from roleguard.domain.permissions import EvaluatorFactory, StandardPermissions
from roleguard.infrastructure.persistence.postgres.connection import create_pool
from roleguard.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from roleguard.interfaces.api.app import create_app
from roleguard.interfaces.api.middleware.cors import CORSMiddleware
from roleguard.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_roleguard_app(
    settings: Settings | None = None,
    evaluator_factory: EvaluatorFactory = StandardPermissions,
):
    """Composition root - build Falcon app with all dependencies.

    ``evaluator_factory`` builds the access evaluator of every loaded role.
    """
    settings = settings or get_settings()
    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(
        pool,
        users_table=settings.users_table,
        evaluator_factory=evaluator_factory,
    )

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    return create_app(
        uow_factory,
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
        ],
        pool=pool,
    )


def main() -> None:
    """CLI entry point - run the API under uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings)
    logger.info("roleguard v%s starting (%s)", __version__, settings.environment)
    app = create_roleguard_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
