from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class NumberMention(_Frozen):
    label: str
    value: float
    context: str


class Category(_Frozen):
    name: str
    items: list[str] = Field(default_factory=list)
    count: int = 0


class TimelineEntry(_Frozen):
    period: str
    events: list[str] = Field(default_factory=list)


class Statistic(_Frozen):
    label: str
    value: str


class ChartData(_Frozen):
    numbers: list[NumberMention] = Field(default_factory=list)
    categories: list[Category] = Field(default_factory=list)
    timeline: list[TimelineEntry] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.numbers or self.categories or self.timeline)


class AnalysisResult(_Frozen):
    key_points: list[str] = Field(default_factory=list, alias="keyPoints")
    statistics: list[Statistic] = Field(default_factory=list)
    themes: list[str] = Field(default_factory=list)
    summary: str
    chart_data: ChartData = Field(default_factory=ChartData, alias="chartData")

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
