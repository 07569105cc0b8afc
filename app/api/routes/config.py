"""Site configuration distribution endpoints.

GET  /api/config            Current header/footer snapshot
POST /api/config            Shallow-merge a partial document into one component
GET  /api/config/resolved   Locale-resolved configuration of one component
GET  /api/config/cache      Resolved-config cache statistics
DELETE /api/config/cache    Invalidate resolved-config cache entries
"""

import asyncio
from typing import Any, Optional

from fastapi import APIRouter, Header, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from api.dependencies.rate_limits import get_limiter, write_rate_limit
from api.dependencies.site_config import ConfigStoreDep
from infrastructure.logging import get_module_logger
from infrastructure.services import LocaleResolverDep, SettingsDep
from modules.site_config import (
    COMPONENTS,
    ConfigUpdateError,
    ConfigUpdateRequest,
    ConfigValidationError,
    VersionConflictError,
    clear_config_cache,
    get_config_cache_stats,
    get_resolved_footer_config,
    get_resolved_header_config,
)
from modules.site_config.schemas import Component

logger = get_module_logger()
router = APIRouter(prefix="/api/config", tags=["Site Configuration"])
limiter = get_limiter()

RESOLVERS = {
    "header": get_resolved_header_config,
    "footer": get_resolved_footer_config,
}


def _error_response(status_code: int, error: str, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, **extra},
    )


@router.get("")
async def read_config(
    response: Response,
    store: ConfigStoreDep,
    settings: SettingsDep,
    component: Optional[str] = None,
):
    """Return the snapshot. An unknown ``component`` returns both components."""
    delay = settings.site_config.read_delay_seconds
    if delay > 0:
        await asyncio.sleep(delay)

    selected = component if component in COMPONENTS else None
    snapshot = store.read(selected)
    response.headers["Cache-Control"] = (
        f"public, max-age={settings.site_config.cache_max_age}"
    )
    return snapshot


@router.post("")
@limiter.limit(write_rate_limit)
async def update_config(request: Request, store: ConfigStoreDep):
    """Merge ``config`` into ``component``: ``{component, config, expectedVersion?}``."""
    try:
        body = await request.json()
    except ValueError:
        return _error_response(400, "Invalid request", "Request body must be valid JSON")

    try:
        update = ConfigUpdateRequest.model_validate(body)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]) or "body" for error in e.errors()
        )
        logger.warning("config_update_request_invalid", fields=fields)
        return _error_response(
            400,
            "Invalid request",
            f"Expected {{component: header|footer, config: object}}; invalid: {fields}",
        )

    try:
        result = store.write(
            update.component, update.config, expected_version=update.expected_version
        )
    except VersionConflictError as e:
        return _error_response(
            409,
            "Version conflict",
            e.message,
            currentVersion=e.current_version,
        )
    except ConfigUpdateError as e:
        details = [{"loc": loc, "msg": msg} for loc, msg in (e.details or [])]
        return _error_response(422, "Invalid configuration", e.message, details=details)

    return {
        "success": True,
        "version": result["version"],
        "lastUpdated": result["lastUpdated"],
        "message": f"{update.component} configuration updated successfully",
    }


@router.get("/resolved")
def read_resolved_config(
    component: Component,
    resolver: LocaleResolverDep,
    locale: Optional[str] = None,
    accept_language: Optional[str] = Header(default=None),
):
    """Resolve one component for ``locale``, else Accept-Language, else the default."""
    try:
        resolved_locale = resolver.resolve(locale, accept_language)
    except ValueError as e:
        return _error_response(400, "Unsupported locale", str(e))

    try:
        config = RESOLVERS[component](resolved_locale.value)
    except ConfigValidationError as e:
        return _error_response(
            500,
            "Invalid configuration",
            str(e),
            details=[{"loc": loc, "msg": msg} for loc, msg in e.errors],
        )

    return {"locale": resolved_locale.value, component: config.to_document()}


@router.get("/cache")
def read_cache_stats():
    """Resolved-config cache sizes and cached locales."""
    return get_config_cache_stats()


@router.delete("/cache")
def invalidate_cache(locale: Optional[str] = None):
    """Drop cached entries for ``locale``, or all entries."""
    clear_config_cache(locale)
    logger.info("config_cache_cleared", locale=locale or "*")
    return {"cleared": locale or "all", **get_config_cache_stats()}
