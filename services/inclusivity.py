"""Gendered-language scoring for job descriptions."""
from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from services.lexicon import FEMININE_CODED_WORDS, MASCULINE_CODED_WORDS, NEUTRAL_ALTERNATIVES

logger = logging.getLogger(__name__)


class Coding(str, Enum):
    masculine = "masculine"
    feminine = "feminine"


class GenderRating(str, Enum):
    strongly_masculine = "strongly-masculine"
    masculine = "masculine"
    neutral = "neutral"
    feminine = "feminine"
    strongly_feminine = "strongly-feminine"


@dataclass(frozen=True)
class GenderCodedWordMatch:
    word: str
    coding: Coding
    count: int
    alternatives: tuple[str, ...] | None = None


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of scanning one block of text.

    ``score`` runs from -100 (only masculine-coded terms) to +100 (only
    feminine-coded terms); 0 means balanced or nothing found.
    """

    score: int
    rating: GenderRating
    masculine_words: tuple[GenderCodedWordMatch, ...] = ()
    feminine_words: tuple[GenderCodedWordMatch, ...] = ()
    total_masculine_count: int = 0
    total_feminine_count: int = 0
    suggestions: tuple[str, ...] = ()
    summary: str = ""

    def as_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["rating"] = self.rating.value
        payload["suggestions"] = list(self.suggestions)
        for key in ("masculine_words", "feminine_words"):
            payload[key] = list(payload[key])
            for match in payload[key]:
                match["coding"] = match["coding"].value
                if match["alternatives"] is not None:
                    match["alternatives"] = list(match["alternatives"])
        return payload


MASCULINE_ADVISORY = (
    "This job description uses more masculine-coded language, which research shows can "
    "discourage women and non-binary individuals from applying."
)
COLLABORATIVE_ADVICE = (
    "Try adding collaborative language like 'team', 'support', 'together', or 'community'."
)
FEMININE_ADVISORY = (
    "This description uses more feminine-coded language. While inclusive, balance with some "
    "achievement-oriented terms may broaden appeal."
)
NEUTRAL_PRAISE = (
    "Great job! This description uses balanced, inclusive language that should appeal to "
    "candidates of all genders."
)
NO_CODED_LANGUAGE_SUMMARY = "No gendered language detected. This is a neutral job description."

MAX_REPLACEMENT_SUGGESTIONS = 3

RATING_LABELS: MappingProxyType[GenderRating, str] = MappingProxyType(
    {
        GenderRating.strongly_masculine: "Strongly Masculine-Coded",
        GenderRating.masculine: "Masculine-Coded",
        GenderRating.neutral: "Gender Neutral",
        GenderRating.feminine: "Feminine-Coded",
        GenderRating.strongly_feminine: "Strongly Feminine-Coded",
    }
)

RATING_COLORS: MappingProxyType[GenderRating, str] = MappingProxyType(
    {
        GenderRating.strongly_masculine: "blue-600",
        GenderRating.masculine: "blue-500",
        GenderRating.neutral: "green-600",
        GenderRating.feminine: "purple-500",
        GenderRating.strongly_feminine: "purple-600",
    }
)

for _name, _table in (("RATING_LABELS", RATING_LABELS), ("RATING_COLORS", RATING_COLORS)):
    _missing = set(GenderRating) - set(_table)
    if _missing:
        raise RuntimeError(f"{_name} has no entry for {sorted(r.value for r in _missing)}")


def _build_matcher(stems: Iterable[str]) -> re.Pattern[str]:
    # Longest stems first so "leader" wins over "lead" at the same position.
    ordered = sorted(stems, key=lambda stem: (-len(stem), stem))
    alternation = "|".join(re.escape(stem) for stem in ordered)
    return re.compile(rf"\b({alternation})\w*\b", re.ASCII)


_MATCHER = _build_matcher(MASCULINE_CODED_WORDS + FEMININE_CODED_WORDS)


def rating_for_score(score: int) -> GenderRating:
    if score <= -60:
        return GenderRating.strongly_masculine
    if score <= -20:
        return GenderRating.masculine
    if score >= 60:
        return GenderRating.strongly_feminine
    if score >= 20:
        return GenderRating.feminine
    return GenderRating.neutral


def rating_label(rating: GenderRating) -> str:
    return RATING_LABELS[rating]


def rating_color(rating: GenderRating) -> str:
    return RATING_COLORS[rating]


def score_position(score: int) -> float:
    """Map a score onto [0, 1] for a masculine-to-feminine indicator bar."""

    return (score + 100) / 200


def compose_role_text(title: str, description: str, requirements: Iterable[str]) -> str:
    return "\n".join([title, description, *requirements])


def analyze(text: str) -> AnalysisResult:
    """Score ``text`` for masculine- and feminine-coded wording."""

    stem_counts = Counter(match.group(1) for match in _MATCHER.finditer(text.lower()))

    masculine_words = [
        GenderCodedWordMatch(
            word=stem,
            coding=Coding.masculine,
            count=stem_counts[stem],
            alternatives=NEUTRAL_ALTERNATIVES.get(stem),
        )
        for stem in MASCULINE_CODED_WORDS
        if stem_counts[stem]
    ]
    feminine_words = [
        GenderCodedWordMatch(word=stem, coding=Coding.feminine, count=stem_counts[stem])
        for stem in FEMININE_CODED_WORDS
        if stem_counts[stem]
    ]

    total_masculine = sum(match.count for match in masculine_words)
    total_feminine = sum(match.count for match in feminine_words)
    score = _score(total_masculine, total_feminine)
    rating = rating_for_score(score)

    logger.debug(
        "Inclusivity scan: masculine=%d feminine=%d score=%d", total_masculine, total_feminine, score
    )

    return AnalysisResult(
        score=score,
        rating=rating,
        masculine_words=tuple(sorted(masculine_words, key=lambda match: -match.count)),
        feminine_words=tuple(sorted(feminine_words, key=lambda match: -match.count)),
        total_masculine_count=total_masculine,
        total_feminine_count=total_feminine,
        suggestions=_suggestions(rating, masculine_words),
        summary=_summary(rating, total_masculine, total_feminine),
    )


def _score(total_masculine: int, total_feminine: int) -> int:
    total = total_masculine + total_feminine
    if total == 0:
        return 0
    # Half-up rounding of 100 * diff / total in integers: 12.5 -> 13, -12.5 -> -12.
    return (200 * (total_feminine - total_masculine) + total) // (2 * total)


def _suggestions(rating: GenderRating, masculine_words: list[GenderCodedWordMatch]) -> tuple[str, ...]:
    if rating in (GenderRating.strongly_masculine, GenderRating.masculine):
        suggestions = [MASCULINE_ADVISORY]
        replaceable = [match for match in masculine_words if match.alternatives]
        for match in replaceable[:MAX_REPLACEMENT_SUGGESTIONS]:
            suggestions.append(f'Consider replacing "{match.word}" with: {", ".join(match.alternatives)}')
        suggestions.append(COLLABORATIVE_ADVICE)
        return tuple(suggestions)
    if rating in (GenderRating.strongly_feminine, GenderRating.feminine):
        return (FEMININE_ADVISORY,)
    return (NEUTRAL_PRAISE,)


def _summary(rating: GenderRating, total_masculine: int, total_feminine: int) -> str:
    if total_masculine + total_feminine == 0:
        return NO_CODED_LANGUAGE_SUMMARY
    if rating is GenderRating.neutral:
        return (
            f"Good balance! Found {total_masculine} masculine-coded and "
            f"{total_feminine} feminine-coded terms."
        )
    if rating in (GenderRating.strongly_masculine, GenderRating.masculine):
        return (
            f"This description leans masculine with {total_masculine} masculine-coded "
            f"vs {total_feminine} feminine-coded terms."
        )
    return (
        f"This description leans feminine with {total_feminine} feminine-coded "
        f"vs {total_masculine} masculine-coded terms."
    )
