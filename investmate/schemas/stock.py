from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


class QuoteResponse(BaseModel):
    symbol: str = Field(description="Normalized ticker symbol (e.g. VOO)")
    current: float = Field(description="Latest traded price")
    change: float = Field(description="Absolute change from previous close")
    change_pct: float = Field(description="Percentage change from previous close")
    open: float = Field(description="Session open price")
    high: float = Field(description="Session high price")
    low: float = Field(description="Session low price")
    prev_close: float = Field(description="Previous session close price")
    timestamp: int | None = Field(default=None, description="Quote time in epoch milliseconds")

    model_config = _CAMEL


class CandlePoint(BaseModel):
    time: int = Field(description="Bucket start in epoch milliseconds")
    open: float = Field(description="Opening price")
    high: float = Field(description="Highest price in the bucket")
    low: float = Field(description="Lowest price in the bucket")
    close: float = Field(description="Closing price")
    volume: float = Field(description="Traded volume")


class CandleSeriesResponse(BaseModel):
    symbol: str = Field(description="Normalized ticker symbol")
    range: str = Field(description="Resolved range label: 1d, 1w, 1m, 3m or 1y")
    resolution: str = Field(description="Finnhub candle resolution (e.g. 5, 30, 60, D)")
    points: list[CandlePoint] = Field(description="OHLCV candles in ascending time order")


class HistoryPoint(BaseModel):
    t: int = Field(description="Epoch milliseconds")
    c: float = Field(description="Close price")


class HistoryResponse(BaseModel):
    symbol: str = Field(description="Normalized ticker symbol")
    range: str = Field(description="Range label as requested")
    points: list[HistoryPoint] = Field(description="Close prices for the sparkline")


class EtfProfile(BaseModel):
    name: str | None = Field(default=None, description="Fund name (falls back to description, then symbol)")
    category: str | None = Field(default=None, description="Fund category")
    expense_ratio: float | None = Field(default=None, description="Expense ratio as reported by the provider")
    isin: str | None = Field(default=None, description="ISIN code")
    exchange: str | None = Field(default=None, description="Listing exchange")

    model_config = _CAMEL


class EtfHolding(BaseModel):
    symbol: str = Field(description="Holding ticker symbol (uppercase, may be empty)")
    description: str = Field(description="Holding name")
    weight: float = Field(description="Holding weight as reported by the provider")


class EtfOverviewResponse(BaseModel):
    symbol: str = Field(description="Normalized ETF symbol")
    profile: EtfProfile = Field(description="Descriptive fund profile")
    holdings: list[EtfHolding] = Field(description="Top holdings in provider order (at most 10)")
