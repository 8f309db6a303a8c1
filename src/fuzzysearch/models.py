from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Options(BaseModel):
    """Search configuration bound to an engine for its lifetime."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # 0 = exact match only, 1 = match everything
    threshold: float = Field(default=0.4, ge=0.0, le=1.0)
    keys: tuple[str, ...] = ()
    case_sensitive: bool = Field(default=False, alias="caseSensitive")


@dataclass(frozen=True)
class SearchResult:
    """A matched item and its score (lower is better)."""

    item: Any
    score: float
