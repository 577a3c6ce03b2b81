from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


class SectorMove(BaseModel):
    sector: str = Field(description="Sector name")
    symbol: str = Field(description="Sector ETF used as proxy (e.g. XLK)")
    move_pct: float = Field(description="Daily percentage move of the proxy, 0 when unavailable")

    model_config = _CAMEL


class HeatmapResponse(BaseModel):
    sectors: list[SectorMove]


class SentimentItem(BaseModel):
    symbol: str = Field(description="Ticker symbol")
    move_pct: float = Field(description="Daily percentage move, 0 when unavailable")
    sentiment_score: float | None = Field(default=None, description="Finnhub company news score")

    model_config = _CAMEL


class SentimentResponse(BaseModel):
    items: list[SentimentItem]


class Alert(BaseModel):
    title: str = Field(description="Short headline (e.g. 'NVDA +6.2% intraday')")
    body: str = Field(description="Suggested follow-up")


class AlertsResponse(BaseModel):
    alerts: list[Alert]


class EarningsEntry(BaseModel):
    symbol: str = Field(description="Ticker symbol")
    date: str = Field(description="Report date (YYYY-MM-DD)")
    hour: str = Field(description="bmo, amc, dmh or empty")
    eps_actual: float | None = Field(default=None, description="Reported EPS")
    eps_estimate: float | None = Field(default=None, description="Consensus EPS estimate")

    model_config = _CAMEL


class EarningsResponse(BaseModel):
    earnings: list[EarningsEntry]
