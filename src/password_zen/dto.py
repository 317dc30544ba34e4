from typing import Annotated

import annotated_types
from pydantic import BaseModel, ConfigDict, Field

from .generator import MAX_LENGTH

__all__ = ("AnalysisCriteria", "GenerationDefaults")

_config = ConfigDict(extra="forbid", frozen=True)


class AnalysisCriteria(BaseModel):
    model_config = _config

    min_length: Annotated[int, annotated_types.Ge(0)] = 8
    require_symbols: bool = False
    require_digits: bool = True
    require_uppercase: bool = True
    require_lowercase: bool = True


class GenerationDefaults(BaseModel):
    model_config = _config

    length: int = Field(default=12, ge=1, le=MAX_LENGTH)
    include_digits: bool = True
    include_symbols: bool = False
    exclude_ambiguous: bool = False
    charset: str = ""
