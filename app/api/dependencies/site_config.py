"""Dependencies for the site configuration routes."""

from typing import Annotated

from fastapi import Depends, Request

from infrastructure.services import get_settings, get_translator
from modules.site_config import ConfigStore, create_config_store


def get_config_store(request: Request) -> ConfigStore:
    """Return the application's snapshot store, creating it on first use."""
    store = getattr(request.app.state, "config_store", None)
    if store is None:
        store = create_config_store(get_settings().site_config, get_translator())
        request.app.state.config_store = store
    return store


ConfigStoreDep = Annotated[ConfigStore, Depends(get_config_store)]
