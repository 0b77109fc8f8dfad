"""
Dependency injection for API endpoints.

The league snapshot and the response cache live on `app.state`, set up by
`create_app`. When no snapshot was passed to `create_app`, the export at
`settings.export_path` is loaded on first use.
"""

import logging
from typing import Annotated

from fastapi import Depends, Request

from ..core.config import get_settings
from ..services import LeagueService
from ..snapshot import LeagueSnapshot, load_snapshot
from .cache import SimpleCache

logger = logging.getLogger(__name__)


def get_snapshot(request: Request) -> LeagueSnapshot:
    """
    Dependency that provides the league snapshot.

    Raises:
        SnapshotLoadError: If the configured export cannot be loaded
    """
    state = request.app.state
    if getattr(state, "snapshot", None) is None:
        settings = get_settings()
        logger.info("Loading league export from %s", settings.export_path)
        state.snapshot = load_snapshot(settings.export_path, league_id=settings.league_id)
    return state.snapshot


def get_league_service(snapshot: Annotated[LeagueSnapshot, Depends(get_snapshot)]) -> LeagueService:
    return LeagueService(snapshot)


def get_response_cache(request: Request) -> SimpleCache:
    return request.app.state.cache


# Type aliases for dependency injection
LeagueDependency = Annotated[LeagueService, Depends(get_league_service)]
CacheDependency = Annotated[SimpleCache, Depends(get_response_cache)]
