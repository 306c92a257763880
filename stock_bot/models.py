"""
Data models shared by fetchers, chat providers and the console frontend

Every remote payload is mapped into one of these pydantic models before the
rest of the program sees it. Outcomes travel as Result objects so a caller
always has to look at `ok` before touching `data`.
"""

from typing import Any, Dict, Generic, List, Literal, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict


T = TypeVar('T')


class Result(BaseModel, Generic[T]):
    """
    Success-with-data or failure-with-reason

    Usage:
        Result.success(quote)        → ok=True, data=quote
        Result.failure("timed out")  → ok=False, error="timed out"
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    ok: bool
    data: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, data: Any = None) -> 'Result':
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, reason: str) -> 'Result':
        return cls(ok=False, error=reason)


class StockQuote(BaseModel):
    """Real-time quote for one symbol; any field may be missing upstream"""
    price: Optional[float] = None
    day_high: Optional[float] = None
    day_low: Optional[float] = None
    market_cap: Optional[float] = None
    pe_ratio: Optional[float] = None
    volume: Optional[float] = None

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> 'StockQuote':
        return cls(
            price=item.get('price'),
            day_high=item.get('dayHigh'),
            day_low=item.get('dayLow'),
            market_cap=item.get('marketCap'),
            pe_ratio=item.get('pe'),
            volume=item.get('volume'),
        )


class GainerEntry(BaseModel):
    """One row of the top gainers list"""
    symbol: Optional[str] = None
    company_name: Optional[str] = None
    price: Optional[float] = None
    # The gainers feed has sent both 2.35 and "+2.35%" for this field
    change_percent: Union[float, str, None] = None

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> 'GainerEntry':
        return cls(
            symbol=item.get('symbol'),
            company_name=item.get('name'),
            price=item.get('price'),
            change_percent=item.get('changesPercentage'),
        )


class ChatTurn(BaseModel):
    """
    A single message in conversation history

    Uses the Gemini role names; providers with other conventions translate
    'model' themselves.
    """
    role: Literal['user', 'model']
    text: str

    def to_gemini(self) -> Dict[str, Any]:
        return {'role': self.role, 'parts': [self.text]}

    def to_openai(self) -> Dict[str, str]:
        return {'role': 'assistant' if self.role == 'model' else 'user', 'content': self.text}


def turns_to_gemini(turns: List[ChatTurn]) -> List[Dict[str, Any]]:
    return [turn.to_gemini() for turn in turns]
