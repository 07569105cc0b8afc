from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from infrastructure.services import get_settings
from server.lifespan import lifespan
from server.request_middleware import RequestContextMiddleware


def create_app() -> FastAPI:
    """Build the site configuration service application."""
    settings = get_settings()

    app = FastAPI(title="Site Configuration Service", lifespan=lifespan)
    setup_rate_limiter(app)

    allow_origins = ["*"] if settings.is_production else settings.server.allowed_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    app.include_router(api_router)
    return app


handler = create_app()
