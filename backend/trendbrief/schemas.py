# trendbrief/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class TrendExample(CamelModel):
    source: str
    title: str
    permalink: str


class Trend(CamelModel):
    phrase: str
    score: float
    count: int
    examples: list[TrendExample] = Field(default_factory=list)   # at most 3


class SourceTrends(CamelModel):
    top_trends: list[Trend] = Field(default_factory=list)
    sample_size: int = 0                                         # sum of phrase counts, not posts


class TrendBrief(CamelModel):
    generated_at: str
    sources: list[str]
    top_trends: list[Trend]
    by_source: dict[str, SourceTrends]


class ErrorResponse(BaseModel):
    error: str
