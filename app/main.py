"""FastAPI entrypoint wiring services together."""
from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.database import get_session, init_models
from app.dependencies import role_catalog, role_or_404, settings_provider
from app.models import Role
from app.schemas import (
    InclusivityReport,
    RatingBand,
    RoleCreate,
    RoleDetail,
    RoleStatus,
    RoleSummary,
    RoleUpdate,
    TextAnalysisRequest,
)
from services import GenderRating, InvalidRoleError, RoleCatalog, analyze
from services.inclusivity import rating_color, rating_label

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(title="Talent Flow", version="0.1.0")

    @app.on_event("startup")
    async def _startup() -> None:  # pragma: no cover - framework hook
        await init_models()

    @app.exception_handler(InvalidRoleError)
    async def _invalid_role(request: Request, exc: InvalidRoleError) -> JSONResponse:
        logger.info("Rejected role change on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.post("/inclusivity/analyze", response_model=InclusivityReport)
    async def analyze_text(
        payload: TextAnalysisRequest,
        settings: Settings = Depends(settings_provider),
    ) -> InclusivityReport:
        if len(payload.text) > settings.analysis_max_text_length:
            logger.info("Rejected %d-character analysis request", len(payload.text))
            raise HTTPException(
                status_code=413,
                detail=f"Text exceeds {settings.analysis_max_text_length} characters",
            )
        return InclusivityReport.from_result(analyze(payload.text))

    @app.get("/inclusivity/ratings", response_model=list[RatingBand])
    async def list_rating_bands() -> list[RatingBand]:
        return [
            RatingBand(rating=rating, label=rating_label(rating), color=rating_color(rating))
            for rating in GenderRating
        ]

    @app.post("/roles", response_model=RoleSummary, status_code=201)
    async def create_role(
        payload: RoleCreate,
        session: AsyncSession = Depends(get_session),
        catalog: RoleCatalog = Depends(role_catalog),
    ) -> RoleSummary:
        role = await catalog.create_role(session, fields=payload.model_dump(mode="json"))
        return RoleSummary.model_validate(role)

    @app.get("/roles", response_model=list[RoleSummary])
    async def list_roles(
        status: RoleStatus | None = None,
        session: AsyncSession = Depends(get_session),
        catalog: RoleCatalog = Depends(role_catalog),
    ) -> list[RoleSummary]:
        roles = await catalog.list_roles(session, status=status.value if status else None)
        return [RoleSummary.model_validate(role) for role in roles]

    @app.get("/roles/{role_id}", response_model=RoleDetail)
    async def get_role(role: Role = Depends(role_or_404)) -> RoleDetail:
        return RoleDetail.model_validate(role)

    @app.patch("/roles/{role_id}", response_model=RoleDetail)
    async def update_role(
        payload: RoleUpdate,
        role: Role = Depends(role_or_404),
        session: AsyncSession = Depends(get_session),
        catalog: RoleCatalog = Depends(role_catalog),
    ) -> RoleDetail:
        role = await catalog.update_role(
            session, role, changes=payload.model_dump(mode="json", exclude_unset=True)
        )
        return RoleDetail.model_validate(role)

    @app.get("/roles/{role_id}/inclusivity", response_model=InclusivityReport)
    async def role_inclusivity(role: Role = Depends(role_or_404)) -> InclusivityReport:
        return InclusivityReport.from_result(RoleCatalog.analyze_role(role))

    return app


app = create_app()
