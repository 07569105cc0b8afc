from unittest.mock import Mock, patch

import pytest
from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from api.dependencies import rate_limits
from api.routes.config import router as config_router
from api.routes.system import router as system_router
from infrastructure.configuration import Settings, SiteConfigSettings
from utils.tests import create_test_app, rate_limiting_helper


@pytest.mark.asyncio
async def test_rate_limit_handler():
    mock_request = Mock(spec=Request)
    mock_exception = Mock(spec=RateLimitExceeded)

    response = await rate_limits.rate_limit_handler(mock_request, mock_exception)

    assert isinstance(response, JSONResponse)
    assert response.status_code == 429
    assert response.body.decode("utf-8") == '{"message":"Rate limit exceeded"}'


def test_write_rate_limit_reads_settings():
    settings = Settings(
        site_config=SiteConfigSettings(SITE_CONFIG_WRITE_RATE_LIMIT="5/second")
    )
    with patch.object(rate_limits, "get_settings", return_value=settings):
        assert rate_limits.write_rate_limit() == "5/second"


def test_get_limiter_returns_shared_instance():
    assert rate_limits.get_limiter() is rate_limits.limiter


@pytest.mark.asyncio
async def test_system_endpoint_rate_limiting():
    """The /version route allows 50 requests per minute."""
    app = create_test_app(system_router)
    await rate_limiting_helper(app, "/version", request_limit=50)


@pytest.mark.asyncio
async def test_config_write_rate_limiting(config_store):
    """Snapshot writes are limited by SITE_CONFIG_WRITE_RATE_LIMIT."""
    settings = Settings(
        site_config=SiteConfigSettings(SITE_CONFIG_WRITE_RATE_LIMIT="3/minute")
    )
    app = create_test_app(config_router, config_store=config_store)

    with patch.object(rate_limits, "get_settings", return_value=settings):
        # Empty bodies are rejected by the handler but still count against the limit
        await rate_limiting_helper(
            app, "/api/config", request_limit=3, method="post", expected_status=400
        )
