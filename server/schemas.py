from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateGameRequest(_CamelModel):
    game_id: str = Field(min_length=1, max_length=128)
    player_names: List[str] = Field(default_factory=list)
    cpu_count: int = Field(default=0, ge=0, le=8)


class ActionRequest(_CamelModel):
    action: str = Field(min_length=1)
    payload: Optional[Dict[str, Any]] = None


class ApiResponse(BaseModel):
    success: bool
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
