import logging

import uvicorn
from fastapi import FastAPI

from metabox.config import settings
from metabox.database import SessionLocal, init_db
from metabox.exception_handlers import register_exception_handlers
from metabox.middleware.logging import StructuredLoggingMiddleware, setup_structured_logging
from metabox.routes import meta
from metabox.services.meta_manager import MetaManager
from metabox.storage import SQLMetaStorage
from metabox.utils.sanitize import autop

logger = logging.getLogger(__name__)


def create_app(manager: MetaManager | None = None) -> FastAPI:
    """
    Create the admin application.

    Without a manager, one is built over the SQL store configured by
    METABOX_DATABASE_URL; hosts register their queues on
    `app.state.meta_manager`.
    """
    setup_structured_logging(settings.log_level, json_format=settings.log_json)

    if manager is None:
        init_db()
        content_filters = [autop] if settings.rich_text_autop else []
        manager = MetaManager.from_settings(SQLMetaStorage(SessionLocal, content_filters=content_filters))

    app = FastAPI(
        title=settings.app_name,
        description="Metadata field editing for content items",
        debug=settings.debug,
        version=settings.app_version,
    )
    app.state.meta_manager = manager

    app.add_middleware(StructuredLoggingMiddleware)
    register_exception_handlers(app)
    app.include_router(meta.router)

    @app.get("/health", tags=["Root"])
    async def health():
        return {"status": "ok", "queues": len(manager.registry.queue_names())}

    if settings.debug:
        logger.info(f"Running in {settings.environment} mode")
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    return app


if __name__ == "__main__":
    uvicorn.run("main:create_app", factory=True, host="127.0.0.1", port=8000)
