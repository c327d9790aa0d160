from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roadtrip_ai.api import routes_ai, routes_conversation, routes_health
from roadtrip_ai.cache.store import TTLCache
from roadtrip_ai.core.config import settings
from roadtrip_ai.core.logging import configure_logging
from roadtrip_ai.services.advisor_service import AdvisorService
from roadtrip_ai.storage.repository import InMemoryRepository


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Roadtrip Assistant", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    repository = InMemoryRepository()
    advisor_service = AdvisorService(cache=TTLCache(settings.cache_ttl_seconds))

    app.include_router(routes_health.router, tags=["health"])
    app.include_router(routes_ai.router, prefix="/ai", tags=["assistant"])
    app.include_router(routes_conversation.router, prefix="/ai", tags=["conversations"])

    # Shared state for dependencies
    app.state.repository = repository
    app.state.advisor_service = advisor_service
    app.state.settings = settings
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
