"""Health check endpoints."""

import logging

import falcon.asgi
from psycopg import Error as PsycopgError
from psycopg_pool import AsyncConnectionPool, PoolTimeout

logger = logging.getLogger(__name__)


class HealthResource:
    """Liveness and readiness. Readiness pings the database when a pool is given."""

    def __init__(self, pool: AsyncConnectionPool | None = None) -> None:
        self._pool = pool

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (database)."""
        if self._pool is not None:
            try:
                async with self._pool.connection(timeout=2.0) as conn:
                    await conn.execute("SELECT 1")
            except (PsycopgError, PoolTimeout) as e:
                logger.warning("Readiness check failed: %s", e)
                resp.media = {"status": "unavailable"}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
