"""Persistence of roles together with their inclusivity snapshot."""
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings
from app.models import Role
from services.inclusivity import AnalysisResult, analyze, compose_role_text

logger = logging.getLogger(__name__)

_ANALYZED_FIELDS = frozenset({"title", "description", "requirements"})
_NULLABLE_FIELDS = frozenset({"salary_min", "salary_max"})


class InvalidRoleError(ValueError):
    """Raised when a role's fields contradict each other."""


class RoleCatalog:
    """Store roles and keep their gendered-language score current."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    async def create_role(self, session: AsyncSession, *, fields: dict[str, Any]) -> Role:
        values = dict(fields)
        if not values.get("salary_currency"):
            values["salary_currency"] = self.settings.default_salary_currency
        self._check_salary(values.get("salary_min"), values.get("salary_max"))

        role = Role(**values)
        self._apply_snapshot(role)
        session.add(role)
        await session.commit()
        await session.refresh(role)

        logger.info(
            "Created role %s (%s) rated %s", role.id, role.title, role.inclusivity_rating
        )
        return role

    async def list_roles(self, session: AsyncSession, *, status: str | None = None) -> list[Role]:
        stmt = select(Role).order_by(Role.created_at.desc())
        if status is not None:
            stmt = stmt.where(Role.status == status)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def get_role(self, session: AsyncSession, role_id: str) -> Role | None:
        result = await session.execute(select(Role).where(Role.id == role_id))
        role = result.scalar_one_or_none()
        if role is None:
            logger.warning("Role %s not found", role_id)
        return role

    async def update_role(self, session: AsyncSession, role: Role, *, changes: dict[str, Any]) -> Role:
        cleared = sorted(name for name, value in changes.items() if value is None and name not in _NULLABLE_FIELDS)
        if cleared:
            raise InvalidRoleError(f"Fields cannot be cleared: {', '.join(cleared)}")
        self._check_salary(
            changes.get("salary_min", role.salary_min),
            changes.get("salary_max", role.salary_max),
        )
        for name, value in changes.items():
            setattr(role, name, value)
        if _ANALYZED_FIELDS & changes.keys():
            self._apply_snapshot(role)

        await session.commit()
        await session.refresh(role)
        return role

    @staticmethod
    def analyze_role(role: Role) -> AnalysisResult:
        return analyze(compose_role_text(role.title, role.description or "", role.requirements or []))

    def _apply_snapshot(self, role: Role) -> None:
        result = self.analyze_role(role)
        role.inclusivity_score = result.score
        role.inclusivity_rating = result.rating.value

    @staticmethod
    def _check_salary(salary_min: float | None, salary_max: float | None) -> None:
        if salary_min is not None and salary_max is not None and salary_min > salary_max:
            raise InvalidRoleError("salary_min must not exceed salary_max")
