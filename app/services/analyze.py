from __future__ import annotations
from app.services import rules as R
from app.models.report import ContentAnalysis


def analyze(text: str) -> ContentAnalysis:
    """
    Run every text rule over `text` and assemble one ContentAnalysis.
    Pure: the same text always yields the same record.
    """
    metrics = R.text_metrics(text)
    ranked = R.keywords(text)

    return ContentAnalysis(
        text=text,
        metrics=metrics,
        readability=R.readability(text, metrics),
        sentiment=R.sentiment(text),
        keywords=ranked,
        hashtags=R.hashtags(text, ranked),
        engagement=R.engagement(text),
        structure=R.structure(text),
    )
