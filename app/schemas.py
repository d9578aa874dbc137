"""Pydantic schemas shared across the API."""
from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from services.inclusivity import (
    AnalysisResult,
    Coding,
    GenderRating,
    rating_color,
    rating_label,
    score_position,
)


class EmploymentType(str, Enum):
    full_time = "full-time"
    part_time = "part-time"
    contract = "contract"
    internship = "internship"


class RoleStatus(str, Enum):
    open = "open"
    closed = "closed"
    draft = "draft"


class TextAnalysisRequest(BaseModel):
    text: str = Field(..., description="Job text to scan, typically title, description and requirements")


class CodedWord(BaseModel):
    word: str
    coding: Coding
    count: int = Field(..., ge=1)
    alternatives: list[str] | None = None


class InclusivityReport(BaseModel):
    score: int = Field(..., ge=-100, le=100)
    rating: GenderRating
    label: str
    color: str
    position: float = Field(..., ge=0.0, le=1.0, description="Score mapped onto a 0-1 indicator bar")
    masculine_words: list[CodedWord] = Field(default_factory=list)
    feminine_words: list[CodedWord] = Field(default_factory=list)
    total_masculine_count: int
    total_feminine_count: int
    suggestions: list[str] = Field(default_factory=list)
    summary: str

    @classmethod
    def from_result(cls, result: AnalysisResult) -> InclusivityReport:
        return cls(
            **result.as_dict(),
            label=rating_label(result.rating),
            color=rating_color(result.rating),
            position=score_position(result.score),
        )


class RatingBand(BaseModel):
    rating: GenderRating
    label: str
    color: str


class RoleCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    department: str = Field(..., min_length=1, max_length=120)
    location: str = Field(..., min_length=1, max_length=200)
    employment_type: EmploymentType = EmploymentType.full_time
    description: str = ""
    requirements: list[str] = Field(default_factory=list)
    salary_min: float | None = Field(default=None, ge=0)
    salary_max: float | None = Field(default=None, ge=0)
    salary_currency: str | None = Field(default=None, min_length=3, max_length=3)
    status: RoleStatus = RoleStatus.draft

    @model_validator(mode="after")
    def _check_salary_range(self) -> RoleCreate:
        if self.salary_min is not None and self.salary_max is not None and self.salary_min > self.salary_max:
            raise ValueError("salary_min must not exceed salary_max")
        return self


class RoleUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    department: str | None = Field(default=None, min_length=1, max_length=120)
    location: str | None = Field(default=None, min_length=1, max_length=200)
    employment_type: EmploymentType | None = None
    description: str | None = None
    requirements: list[str] | None = None
    salary_min: float | None = Field(default=None, ge=0)
    salary_max: float | None = Field(default=None, ge=0)
    salary_currency: str | None = Field(default=None, min_length=3, max_length=3)
    status: RoleStatus | None = None

    @model_validator(mode="after")
    def _reject_cleared_fields(self) -> RoleUpdate:
        cleared = sorted(
            name
            for name in self.model_fields_set - {"salary_min", "salary_max"}
            if getattr(self, name) is None
        )
        if cleared:
            raise ValueError(f"Fields cannot be cleared: {', '.join(cleared)}")
        return self


class RoleSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    department: str
    location: str
    employment_type: EmploymentType
    status: RoleStatus
    inclusivity_score: int
    inclusivity_rating: GenderRating
    created_at: datetime

    @computed_field
    @property
    def inclusivity_label(self) -> str:
        return rating_label(self.inclusivity_rating)


class RoleDetail(RoleSummary):
    description: str
    requirements: list[str] = Field(default_factory=list)
    salary_min: float | None = None
    salary_max: float | None = None
    salary_currency: str
    updated_at: datetime
