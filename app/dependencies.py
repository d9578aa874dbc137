"""FastAPI dependency helpers."""
from fastapi import Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.database import get_session
from app.models import Role
from services import RoleCatalog


def settings_provider() -> Settings:
    return get_settings()


def role_catalog(settings: Settings = Depends(settings_provider)) -> RoleCatalog:
    return RoleCatalog(settings)


async def role_or_404(
    role_id: str,
    session: AsyncSession = Depends(get_session),
    catalog: RoleCatalog = Depends(role_catalog),
) -> Role:
    role = await catalog.get_role(session, role_id)
    if role is None:
        raise HTTPException(status_code=404, detail="Role not found")
    return role
