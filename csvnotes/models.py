from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Note(BaseModel):
    """One CSV row, ready for display."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    notable: bool = False
    headline: str
    body: str
    link: str
    link_text: str = Field(alias="linkText")
    short_link_text: str = Field(alias="shortLinkText")
    paywall: bool = False


class ResultPage(BaseModel):
    """Template context for the result page: notes on success, a message on failure."""

    model_config = ConfigDict(populate_by_name=True)

    processed_data: Optional[List[Note]] = Field(default=None, alias="processedData")
    error: Optional[str] = Field(default=None, examples=["Error processing file: No file uploaded"])

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_context(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class HealthResponse(BaseModel):
    ok: bool = True
