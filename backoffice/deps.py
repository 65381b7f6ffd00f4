from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.config import Settings
from backoffice.db.main import get_session


def get_settings(request: Request) -> Settings:
    """
    Dependency returning the Settings instance the application was built with.

    Settings are constructed once in ``create_app`` and stored on
    ``app.state``; route handlers and services receive them through this
    dependency instead of importing a global.
    """
    return request.app.state.settings


# Type aliases for easier use in route handlers
SettingsDependency = Annotated[Settings, Depends(get_settings)]
SessionDependency = Annotated[AsyncSession, Depends(get_session)]
