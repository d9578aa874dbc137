import json

import pytest

from services.inclusivity import (
    COLLABORATIVE_ADVICE,
    FEMININE_ADVISORY,
    MASCULINE_ADVISORY,
    NEUTRAL_PRAISE,
    NO_CODED_LANGUAGE_SUMMARY,
    Coding,
    GenderRating,
    analyze,
    compose_role_text,
    rating_color,
    rating_for_score,
    rating_label,
    score_position,
)

SAMPLES = [
    "",
    "12345 !!! ---",
    "We need an aggressive, competitive, and dominant leader who can fight for results.",
    "We value nurturing team members who are determined to succeed.",
    "Lead the team as a leader. Share, share and support each other.",
]


def _match(matches, word):
    return next(match for match in matches if match.word == word)


@pytest.mark.parametrize("text", SAMPLES)
def test_analysis_is_deterministic(text):
    assert analyze(text) == analyze(text)


@pytest.mark.parametrize("text", SAMPLES)
def test_totals_match_word_counts_and_score_is_bounded(text):
    result = analyze(text)
    assert result.total_masculine_count == sum(match.count for match in result.masculine_words)
    assert result.total_feminine_count == sum(match.count for match in result.feminine_words)
    assert -100 <= result.score <= 100
    if result.total_masculine_count + result.total_feminine_count == 0:
        assert result.score == 0


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (-100, GenderRating.strongly_masculine),
        (-60, GenderRating.strongly_masculine),
        (-59, GenderRating.masculine),
        (-20, GenderRating.masculine),
        (-19, GenderRating.neutral),
        (0, GenderRating.neutral),
        (19, GenderRating.neutral),
        (20, GenderRating.feminine),
        (59, GenderRating.feminine),
        (60, GenderRating.strongly_feminine),
        (100, GenderRating.strongly_feminine),
    ],
)
def test_rating_thresholds(score, expected):
    assert rating_for_score(score) is expected


def test_empty_text_is_neutral():
    result = analyze("")
    assert result.score == 0
    assert result.rating is GenderRating.neutral
    assert result.masculine_words == ()
    assert result.feminine_words == ()
    assert result.summary == NO_CODED_LANGUAGE_SUMMARY
    assert result.suggestions == (NEUTRAL_PRAISE,)


def test_masculine_text_gets_replacement_suggestions():
    result = analyze("We need an aggressive, competitive, and dominant leader who can fight for results.")

    assert result.total_masculine_count == 5
    assert result.total_feminine_count == 0
    assert result.score == -100
    assert result.rating is GenderRating.strongly_masculine
    assert {match.word for match in result.masculine_words} == {
        "aggressive",
        "competitive",
        "dominant",
        "leader",
        "fight",
    }
    assert result.suggestions == (
        MASCULINE_ADVISORY,
        'Consider replacing "aggressive" with: proactive, driven, results-oriented',
        'Consider replacing "competitive" with: motivated, goal-oriented, ambitious',
        'Consider replacing "dominant" with: influential, impactful, effective',
        COLLABORATIVE_ADVICE,
    )
    assert result.summary == (
        "This description leans masculine with 5 masculine-coded vs 0 feminine-coded terms."
    )


def test_replacement_suggestions_are_capped_at_three():
    result = analyze("Aggressive rockstar ninja, dominant and competitive.")
    replacements = [s for s in result.suggestions if s.startswith("Consider replacing")]
    assert len(replacements) == 3


def test_balanced_text_is_neutral():
    result = analyze("An independent thinker with a supportive attitude.")

    assert result.total_masculine_count == 1
    assert result.total_feminine_count == 1
    assert result.score == 0
    assert result.rating is GenderRating.neutral
    assert result.summary == "Good balance! Found 1 masculine-coded and 1 feminine-coded terms."


def test_stems_match_word_families():
    result = analyze("We value nurturing team members who are determined to succeed.")

    nurtur = _match(result.feminine_words, "nurtur")
    determine = _match(result.masculine_words, "determine")
    assert (nurtur.coding, nurtur.count) == (Coding.feminine, 1)
    assert (determine.coding, determine.count) == (Coding.masculine, 1)


def test_matching_is_case_insensitive_and_left_anchored():
    assert analyze("AGGRESSIVE Aggressive aggressively").total_masculine_count == 3
    assert analyze("unsupportive and unkind").total_feminine_count == 0
    # A stem matches the start of any longer word.
    assert _match(analyze("kindergarten").feminine_words, "kind").count == 1


def test_overlapping_stems_credit_the_longest():
    result = analyze("Lead the team as a leader who is self-confident and supportive.")

    assert _match(result.masculine_words, "lead").count == 1
    assert _match(result.masculine_words, "leader").count == 1
    assert _match(result.masculine_words, "self-confident").count == 1
    assert "confident" not in {match.word for match in result.masculine_words}
    assert [match.word for match in result.feminine_words] == ["supportive"]


def test_matches_sorted_by_count():
    result = analyze("Trust, share, share, share, support and support.")
    assert [(match.word, match.count) for match in result.feminine_words] == [
        ("share", 3),
        ("support", 2),
        ("trust", 1),
    ]


def test_equal_counts_keep_lexicon_order():
    result = analyze("trust share support")
    assert [match.word for match in result.feminine_words] == ["share", "support", "trust"]

    result = analyze("fight aggressive ambitious aggressive fight")
    assert [match.word for match in result.masculine_words] == ["aggressive", "fight", "ambitious"]


def test_result_is_immutable_and_hashable():
    result = analyze("An aggressive rockstar who is caring.")

    assert hash(result) == hash(analyze("An aggressive rockstar who is caring."))
    with pytest.raises(AttributeError):
        result.masculine_words.append(result.feminine_words[0])


def test_feminine_text_gets_balance_advice():
    result = analyze("We are a caring, supportive and collaborative team.")

    assert result.score == 100
    assert result.rating is GenderRating.strongly_feminine
    assert result.suggestions == (FEMININE_ADVISORY,)
    assert result.summary == (
        "This description leans feminine with 3 feminine-coded vs 0 masculine-coded terms."
    )
    assert all(match.alternatives is None for match in result.feminine_words)


def test_score_rounds_half_up():
    assert analyze("support " * 9 + "lead " * 7).score == 13
    assert analyze("support " * 7 + "lead " * 9).score == -12


@pytest.mark.parametrize("rating", list(GenderRating))
def test_every_rating_has_label_and_color(rating):
    assert isinstance(rating_label(rating), str) and rating_label(rating)
    assert isinstance(rating_color(rating), str) and rating_color(rating)


def test_labels_are_distinct():
    assert len({rating_label(rating) for rating in GenderRating}) == len(GenderRating)


def test_score_position_spans_unit_interval():
    assert score_position(-100) == 0.0
    assert score_position(0) == 0.5
    assert score_position(100) == 1.0


def test_result_serialises_to_plain_json():
    result = analyze("An aggressive rockstar who is caring.")
    payload = json.loads(json.dumps(result.as_dict()))

    assert payload["rating"] == result.rating.value
    assert payload["masculine_words"][0]["coding"] == "masculine"
    assert payload["feminine_words"] == [
        {"word": "caring", "coding": "feminine", "count": 1, "alternatives": None}
    ]


def test_compose_role_text_joins_with_newlines():
    text = compose_role_text("Engineer", "Build things.", ["Python", "SQL"])
    assert text == "Engineer\nBuild things.\nPython\nSQL"
