"""Gender-coded word lists used by the inclusivity analyzer.

Stems follow Gaucher, Friesen & Kay (2011), "Evidence That Gendered Wording in
Job Advertisements Exists and Sustains Gender Inequality". A stem matches any
word that starts with it, so ``nurtur`` covers "nurture" and "nurturing".
"""
from __future__ import annotations

from types import MappingProxyType

MASCULINE_CODED_WORDS: tuple[str, ...] = (
    "active",
    "adventurous",
    "aggressive",
    "ambitious",
    "analytical",
    "assertive",
    "athletic",
    "autonomous",
    "battle",
    "boast",
    "challenge",
    "champion",
    "competitive",
    "confident",
    "courageous",
    "decide",
    "decisive",
    "defend",
    "determine",
    "dominant",
    "dominate",
    "driven",
    "fearless",
    "fight",
    "force",
    "greedy",
    "head-strong",
    "headstrong",
    "hierarchy",
    "hostile",
    "impulsive",
    "independent",
    "individual",
    "intellect",
    "lead",
    "leader",
    "logic",
    "ninja",
    "objective",
    "opinion",
    "outspoken",
    "persist",
    "principle",
    "reckless",
    "rockstar",
    "self-confident",
    "selfconfident",
    "self-reliant",
    "selfreliant",
    "self-sufficient",
    "selfsufficient",
    "stubborn",
    "superior",
    "tackle",
    "thriving",
    "unreasonable",
    "warrior",
)

FEMININE_CODED_WORDS: tuple[str, ...] = (
    "affectionate",
    "agree",
    "caring",
    "child",
    "cheer",
    "collaborate",
    "collaborative",
    "commit",
    "communal",
    "compassion",
    "compassionate",
    "connect",
    "considerate",
    "cooperate",
    "cooperative",
    "depend",
    "emotional",
    "empath",
    "empathy",
    "feel",
    "flatterer",
    "gentle",
    "honest",
    "inclusive",
    "interdependent",
    "interpersonal",
    "kind",
    "kinship",
    "loyal",
    "modesty",
    "nag",
    "nurtur",
    "pleasant",
    "polite",
    "quiet",
    "respond",
    "sensitive",
    "share",
    "sharing",
    "submissive",
    "support",
    "supportive",
    "sympathy",
    "tender",
    "together",
    "trust",
    "understand",
    "warm",
    "whin",
    "yield",
)

# Only masculine-coded stems carry replacements.
NEUTRAL_ALTERNATIVES: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "aggressive": ("proactive", "driven", "results-oriented"),
        "rockstar": ("high-performer", "skilled professional", "expert"),
        "ninja": ("specialist", "expert", "skilled"),
        "dominant": ("influential", "impactful", "effective"),
        "competitive": ("motivated", "goal-oriented", "ambitious"),
        "assertive": ("confident", "self-assured", "decisive"),
    }
)


def _check_tables() -> None:
    overlap = set(MASCULINE_CODED_WORDS) & set(FEMININE_CODED_WORDS)
    if overlap:
        raise RuntimeError(f"Stems coded both ways: {sorted(overlap)}")
    orphans = set(NEUTRAL_ALTERNATIVES) - set(MASCULINE_CODED_WORDS)
    if orphans:
        raise RuntimeError(f"Alternatives for non-masculine stems: {sorted(orphans)}")


_check_tables()
