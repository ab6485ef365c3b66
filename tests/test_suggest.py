import pytest
from app.services.analyze import analyze
from app.services.suggest import (
    CATEGORY_ORDER, CTA_SUGGESTIONS, TRENDY_HASHTAGS, _num, generate_suggestions, overall_score,
)
from app.models.report import Engagement, EngagementFactors, Readability, Sentiment


def _with(analysis, **parts):
    """Copy an analysis with some top-level parts replaced."""
    return analysis.model_copy(update=parts)


def _scored(readability, engagement, sentiment):
    return _with(
        analyze(""),
        readability=Readability(score=readability, level="Easy", grade_level=6),
        engagement=Engagement(score=engagement, factors=EngagementFactors()),
        sentiment=Sentiment(score=sentiment, label="Neutral", confidence=0.5),
    )


def test_overall_score_mean_is_rounded():
    o = overall_score(_scored(80, 60, 0.2))
    assert o.score == 67
    assert o.rating == "Good"


@pytest.mark.parametrize("r,e,s,rating", [
    (100, 90, 0.0, "Excellent"),
    (65, 65, 0.3, "Good"),
    (50, 50, 0.0, "Fair"),
    (0, 0, 0.0, "Poor"),
])
def test_rating_bands(r, e, s, rating):
    assert overall_score(_scored(r, e, s)).rating == rating


def test_suggestions_for_empty_text():
    s = generate_suggestions(analyze(""))
    assert (s.overall.score, s.overall.rating) == (17, "Poor")
    assert [(i.category, i.type) for i in s.improvements] == [
        ("Critical", "Readability"),
        ("Critical", "Engagement"),
        ("Important", "Engagement"),
        ("Important", "SEO"),
        ("Important", "Structure"),
        ("Optional", "Engagement"),
        ("Optional", "Engagement"),
    ]
    assert "score: 0/100" in s.improvements[0].suggestion
    assert "too short (0 words)" in s.improvements[4].suggestion
    assert s.strengths == []
    assert s.call_to_action.detected is False
    assert s.call_to_action.suggestions == CTA_SUGGESTIONS[:3]
    assert [o.title for o in s.optimizations] == ["Use power words", "Include specific numbers"]
    assert s.hashtags.recommended == []
    assert s.hashtags.trendy == TRENDY_HASHTAGS


def test_long_sentences_flagged():
    a = analyze("")
    a = _with(a, metrics=a.metrics.model_copy(update={"average_sentence_length": 30.0}))
    s = generate_suggestions(a)
    long_ones = [i for i in s.improvements if i.type == "Readability" and i.category == "Important"]
    assert len(long_ones) == 1
    assert "(avg: 30 words)" in long_ones[0].suggestion
    assert s.optimizations[0].title == "Break down long sentences"


@pytest.mark.parametrize("value,expected", [
    (30.0, "30"),
    (26.5, "26.5"),
    (123456.7, "123456.7"),
    (1234567.0, "1234567"),
])
def test_numbers_in_messages_keep_all_digits(value, expected):
    assert _num(value) == expected


def test_long_content_is_not_also_short():
    a = analyze("")
    a = _with(a, metrics=a.metrics.model_copy(update={"word_count": 301}))
    msgs = [i.suggestion for i in generate_suggestions(a).improvements]
    assert any("quite long (301 words)" in m for m in msgs)
    assert not any("too short" in m for m in msgs)


def test_missing_intro_only_matters_for_longer_text():
    a = analyze("")
    short = generate_suggestions(_with(a, metrics=a.metrics.model_copy(update={"word_count": 100})))
    longer = generate_suggestions(_with(a, metrics=a.metrics.model_copy(update={"word_count": 150})))
    assert not any("opening paragraph" in i.suggestion for i in short.improvements)
    assert any("opening paragraph" in i.suggestion for i in longer.improvements)


def test_flat_paragraphs_flagged():
    text = "\n\n".join(["one two three four"] * 3)
    s = generate_suggestions(analyze(text))
    assert any(i.suggestion.startswith("Vary your paragraph lengths") for i in s.improvements)
    assert s.improvements[-1].category == "Optional"


def test_negative_tone():
    s = generate_suggestions(analyze("This is bad and terrible."))
    tone = [i for i in s.improvements if i.type == "Tone"]
    assert len(tone) == 1 and tone[0].category == "Important" and tone[0].impact == "High"
    assert "Use power words" not in [o.title for o in s.optimizations]


def test_call_to_action_detected():
    s = generate_suggestions(analyze("Click to subscribe!"))
    assert s.call_to_action.detected is True
    assert s.call_to_action.suggestions == []
    assert "Clear call-to-action encourages reader response" in s.strengths


def test_strengths_for_rich_post():
    intro = "We are so happy to share some great news with all of our readers today!"
    body = "Our team has 3 new guides. What do you want next? 😀"
    outro = "Follow us and share this post with your friends, it would be wonderful for everyone."
    filler = " ".join(["marketing strategy content audience growth"] * 4)
    text = f"{intro}\n\n{body} {filler}\n\n{outro} #growth"
    s = generate_suggestions(analyze(text))
    for expected in (
        "Positive tone that resonates well with audiences",
        "Clear call-to-action encourages reader response",
        "Engaging questions promote audience interaction",
        "Good use of hashtags for discoverability",
        "Optimal content length for social media engagement",
        "Well-structured with clear beginning and ending",
        "Rich keyword variety enhances SEO value",
    ):
        assert expected in s.strengths
    assert s.hashtags.recommended == analyze(text).hashtags.suggested[:5]


@pytest.mark.parametrize("text", [
    "",
    "Short.",
    "This is bad and terrible. Why?",
    "This is amazing! Click here to learn more. #great",
    " ".join(["word"] * 400),
])
def test_improvements_ordered_by_severity(text):
    ranks = [CATEGORY_ORDER[i.category] for i in generate_suggestions(analyze(text)).improvements]
    assert ranks == sorted(ranks)


def test_suggestions_are_deterministic():
    a = analyze("This is amazing! Click here to learn more. #great")
    assert generate_suggestions(a) == generate_suggestions(a)
