"""Service layer for role storage and inclusivity analysis."""

from .inclusivity import AnalysisResult, GenderRating, analyze
from .roles import InvalidRoleError, RoleCatalog

__all__ = ["AnalysisResult", "GenderRating", "analyze", "InvalidRoleError", "RoleCatalog"]
