from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SuggestionRequest(BaseModel):
    query: str = ""
    record: bool = True


class SuggestionResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str
    components: List[str] = Field(default_factory=list)
    snippet: str = ""
    record_id: Optional[str] = Field(default=None, alias="recordId")


class ComponentList(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_components: int = Field(alias="totalComponents")
    components: List[str] = Field(default_factory=list)


class ComponentSnippet(BaseModel):
    name: str
    snippet: str
