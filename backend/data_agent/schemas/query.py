from typing import Any, Literal, Optional
from pydantic import BaseModel, Field

ChartType = Literal["bar", "line", "pie", "scatter"]

class NLQuery(BaseModel):
    question: str

class DataPoint(BaseModel):
    label: str
    value: float

    class Config:
        frozen = True

class QueryResult(BaseModel):
    query: str
    answer: str
    error: bool = False
    sql: str = ""
    data: list[dict[str, Any]] = Field(default_factory=list)
    chart_type: Optional[ChartType] = Field(default=None, alias="chartType")

    class Config:
        frozen = True
        populate_by_name = True

    @classmethod
    def failed(cls, query: str, answer: str) -> "QueryResult":
        return cls(query=query, answer=answer, error=True, sql="", data=[], chart_type=None)
