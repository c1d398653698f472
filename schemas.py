import math
from typing import Annotated, List, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, field_validator

NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]

# BSON stores integers in at most 8 bytes
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class Course(BaseModel):
    """One curriculum course as persisted in the courses collection.

    Types are strict: "3" is not a valid `units`, and nothing is coerced.
    Unknown keys in the source entry are dropped.
    """

    model_config = ConfigDict(extra="ignore")

    code: NonEmptyStr = Field(..., description="Short course identifier, e.g. CS101")
    description: NonEmptyStr = Field(..., description="Human readable course name")
    units: Union[StrictInt, StrictFloat] = Field(..., description="Credit units")
    tags: List[NonEmptyStr] = Field(..., description="Program codes and subject-area labels")

    @field_validator("units", mode="before")
    @classmethod
    def _storable_units(cls, v):
        if isinstance(v, bool):
            return v
        if isinstance(v, int) and not (INT64_MIN <= v <= INT64_MAX):
            raise ValueError("units out of range")
        if isinstance(v, float) and not math.isfinite(v):
            raise ValueError("units must be finite")
        return v


class CourseView(BaseModel):
    """Projected row returned by the read endpoints."""

    description: str
    tags: List[str]


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    ok: bool = True
    ready: bool = False
    store: dict = Field(default_factory=dict)
    load: dict = Field(default_factory=dict)
