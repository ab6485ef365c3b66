from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal

ReadabilityLevel = Literal["Very Easy", "Easy", "Moderate", "Difficult", "Very Difficult"]
SentimentLabel = Literal["Negative", "Neutral", "Positive"]
Variation = Literal["Low", "Medium", "High"]
Category = Literal["Critical", "Important", "Optional"]
ImprovementType = Literal["Readability", "Engagement", "SEO", "Structure", "Tone"]
Impact = Literal["High", "Medium", "Low"]
Rating = Literal["Poor", "Fair", "Good", "Excellent"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Metrics(_Frozen):
    character_count: int = 0
    word_count: int = 0
    sentence_count: int = 0
    paragraph_count: int = 0
    average_word_length: float = 0.0
    average_sentence_length: float = 0.0
    reading_time_minutes: int = 0


class Readability(_Frozen):
    score: int = Field(ge=0, le=100)
    level: ReadabilityLevel
    grade_level: int


class Sentiment(_Frozen):
    score: float = Field(ge=-1, le=1)
    label: SentimentLabel
    confidence: float = Field(ge=0, le=1)


class Keyword(_Frozen):
    word: str
    count: int
    relevance: float = Field(ge=0, le=100)


class Hashtags(_Frozen):
    existing: List[str] = []
    suggested: List[str] = []


class EngagementFactors(_Frozen):
    has_call_to_action: bool = False
    has_question: bool = False
    has_emoji: bool = False
    has_hashtags: bool = False
    has_numbers: bool = False
    has_url: bool = False
    optimal_length: bool = False


class Engagement(_Frozen):
    score: int = Field(ge=0, le=100)
    factors: EngagementFactors


class Structure(_Frozen):
    has_intro: bool = False
    has_body: bool = False
    has_conclusion: bool = False
    paragraph_length_variation: Variation = "Low"


class ContentAnalysis(_Frozen):
    text: str
    metrics: Metrics
    readability: Readability
    sentiment: Sentiment
    keywords: List[Keyword]
    hashtags: Hashtags
    engagement: Engagement
    structure: Structure


class Overall(_Frozen):
    score: int
    rating: Rating


class Improvement(_Frozen):
    category: Category
    type: ImprovementType
    suggestion: str
    impact: Impact


class HashtagSuggestions(_Frozen):
    recommended: List[str]
    trendy: List[str]


class CallToAction(_Frozen):
    detected: bool
    suggestions: List[str]


class Optimization(_Frozen):
    title: str
    before: str
    after: str
    reason: str


class ContentSuggestions(_Frozen):
    overall: Overall
    improvements: List[Improvement]
    strengths: List[str]
    hashtags: HashtagSuggestions
    call_to_action: CallToAction
    optimizations: List[Optimization]
