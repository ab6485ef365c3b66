from __future__ import annotations
from typing import List
from app.core.config import (
    READABILITY_TARGET, LONG_SENTENCE_THRESHOLD, OPTIMAL_LENGTH, MAX_HASHTAGS,
)
from app.services.rules import round_half_up
from app.models.report import (
    ContentAnalysis, ContentSuggestions, Overall, Improvement, HashtagSuggestions,
    CallToAction, Optimization,
)

CATEGORY_ORDER = {"Critical": 0, "Important": 1, "Optional": 2}

TRENDY_HASHTAGS = [
    "#SocialMedia",
    "#ContentMarketing",
    "#DigitalMarketing",
    "#Engagement",
    "#Marketing",
]

CTA_SUGGESTIONS = [
    "What do you think? Share your thoughts in the comments!",
    "Click the link to learn more about this topic.",
    "Follow us for more insights like this!",
    "Tag someone who needs to see this!",
    "Double tap if you agree! ❤️",
    "Save this post for later reference.",
    "Share this with your network!",
    "Join the conversation - comment below!",
]


def _num(value: float) -> str:
    # 30.0 -> "30", 26.5 -> "26.5"
    return str(int(value)) if float(value).is_integer() else str(value)


def overall_score(a: ContentAnalysis) -> Overall:
    scores = [
        a.readability.score,
        a.engagement.score,
        (a.sentiment.score + 1) * 50,  # -1..1 -> 0..100
    ]
    score = int(round_half_up(sum(scores) / len(scores)))

    if score >= 80:
        rating = "Excellent"
    elif score >= 65:
        rating = "Good"
    elif score >= 50:
        rating = "Fair"
    else:
        rating = "Poor"
    return Overall(score=score, rating=rating)


def improvements(a: ContentAnalysis) -> List[Improvement]:
    m, f = a.metrics, a.engagement.factors
    low, high = OPTIMAL_LENGTH
    items: List[Improvement] = []

    def add(category, type_, suggestion, impact):
        items.append(Improvement(category=category, type=type_, suggestion=suggestion, impact=impact))

    if a.readability.score < READABILITY_TARGET:
        add("Critical", "Readability",
            f"Your content is difficult to read (score: {a.readability.score}/100). "
            "Use shorter sentences and simpler words to improve readability.",
            "High")

    if m.average_sentence_length > LONG_SENTENCE_THRESHOLD:
        add("Important", "Readability",
            f"Your sentences are too long (avg: {_num(m.average_sentence_length)} words). "
            "Aim for 15-20 words per sentence for better engagement.",
            "Medium")

    if not f.has_call_to_action:
        add("Critical", "Engagement",
            'Add a clear call-to-action (e.g., "Click to learn more", "Share your thoughts", '
            '"Subscribe for updates").',
            "High")

    if not f.has_question:
        add("Important", "Engagement",
            "Ask a question to encourage audience interaction and comments.",
            "Medium")

    if not f.has_emoji:
        add("Optional", "Engagement",
            "Consider adding relevant emojis to make your content more visually appealing and engaging.",
            "Low")

    if not f.has_hashtags:
        add("Important", "SEO",
            "Add relevant hashtags to increase discoverability and reach.",
            "High")

    if not f.has_numbers:
        add("Optional", "Engagement",
            "Include specific numbers or statistics to add credibility and attract attention.",
            "Medium")

    if m.word_count < low:
        add("Important", "Structure",
            f"Your content is too short ({m.word_count} words). "
            f"Aim for {low}-{high} words for optimal engagement.",
            "High")
    elif m.word_count > high:
        add("Important", "Structure",
            f"Your content is quite long ({m.word_count} words). "
            "Consider breaking it into smaller chunks or using bullet points.",
            "Medium")

    if not a.structure.has_intro and m.word_count > 100:
        add("Important", "Structure",
            "Add a strong opening paragraph to hook your readers immediately.",
            "Medium")

    if a.structure.paragraph_length_variation == "Low" and m.paragraph_count > 2:
        add("Optional", "Structure",
            "Vary your paragraph lengths to create better visual rhythm and maintain reader interest.",
            "Low")

    if a.sentiment.label == "Negative":
        add("Important", "Tone",
            "Your content has a negative tone. Consider using more positive language to increase engagement.",
            "High")

    # sorted() is stable: checklist order survives within a category
    return sorted(items, key=lambda i: CATEGORY_ORDER[i.category])


def strengths(a: ContentAnalysis) -> List[str]:
    f = a.engagement.factors
    out: List[str] = []
    if a.readability.score >= 70:
        out.append(f"Excellent readability ({a.readability.score}/100) - easy for your audience to understand")
    if a.engagement.score >= 70:
        out.append(f"Strong engagement factors ({a.engagement.score}/100) - well-optimized for interaction")
    if a.sentiment.label == "Positive":
        out.append("Positive tone that resonates well with audiences")
    if f.has_call_to_action:
        out.append("Clear call-to-action encourages reader response")
    if f.has_question:
        out.append("Engaging questions promote audience interaction")
    if f.has_hashtags:
        out.append("Good use of hashtags for discoverability")
    if f.optimal_length:
        out.append("Optimal content length for social media engagement")
    if a.structure.has_intro and a.structure.has_conclusion:
        out.append("Well-structured with clear beginning and ending")
    if len(a.keywords) >= 5:
        out.append("Rich keyword variety enhances SEO value")
    return out


def call_to_action(a: ContentAnalysis) -> CallToAction:
    detected = a.engagement.factors.has_call_to_action
    return CallToAction(detected=detected, suggestions=[] if detected else CTA_SUGGESTIONS[:3])


def optimizations(a: ContentAnalysis) -> List[Optimization]:
    out: List[Optimization] = []
    if a.metrics.average_sentence_length > LONG_SENTENCE_THRESHOLD:
        out.append(Optimization(
            title="Break down long sentences",
            before="Long sentences with multiple clauses",
            after="Short, punchy sentences. One idea per sentence.",
            reason="Improves readability and keeps readers engaged",
        ))
    if a.sentiment.label == "Neutral":
        out.append(Optimization(
            title="Use power words",
            before="Good information about the product",
            after="Amazing insights that transform your strategy",
            reason="Power words create emotional connection and drive action",
        ))
    if not a.engagement.factors.has_numbers:
        out.append(Optimization(
            title="Include specific numbers",
            before="Many people use this method",
            after="87% of successful marketers use this proven method",
            reason="Numbers add credibility and attract attention",
        ))
    return out


def generate_suggestions(analysis: ContentAnalysis) -> ContentSuggestions:
    return ContentSuggestions(
        overall=overall_score(analysis),
        improvements=improvements(analysis),
        strengths=strengths(analysis),
        hashtags=HashtagSuggestions(
            recommended=analysis.hashtags.suggested[:MAX_HASHTAGS],
            trendy=TRENDY_HASHTAGS[:MAX_HASHTAGS],
        ),
        call_to_action=call_to_action(analysis),
        optimizations=optimizations(analysis),
    )
