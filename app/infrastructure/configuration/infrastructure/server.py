"""Server and development infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        BACKEND_URL: Backend API base URL (default: http://127.0.0.1:8000)
        HOST: Interface uvicorn binds to (default: 0.0.0.0)
        PORT: Port uvicorn listens on (default: 8000)
        CORS_ALLOWED_ORIGINS: Comma separated list of allowed origins
            (ignored in production, where all origins are allowed)

    Example:
        ```python
        from infrastructure.services import get_settings

        backend_url = get_settings().server.BACKEND_URL
        ```
    """

    BACKEND_URL: str = Field(default="http://127.0.0.1:8000", alias="BACKEND_URL")
    HOST: str = Field(default="0.0.0.0", alias="HOST")
    PORT: int = Field(default=8000, alias="PORT")
    CORS_ALLOWED_ORIGINS: str = Field(
        default="http://localhost:3000,http://localhost:8000,http://127.0.0.1:8000",
        alias="CORS_ALLOWED_ORIGINS",
    )

    def allowed_origins(self) -> list[str]:
        """Split CORS_ALLOWED_ORIGINS into a deduplicated list."""
        result: list[str] = []
        for origin in self.CORS_ALLOWED_ORIGINS.split(","):
            origin = origin.strip()
            if origin and origin not in result:
                result.append(origin)
        return result
