"""
Pydantic models for committees.

Committees are static reference data; instances are frozen so the
catalog cannot be altered at runtime.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class CommitteeCategory(str, Enum):
    DOMESTIC = "domestic"
    INTERNATIONAL = "international"


class Committee(BaseModel):
    id: str = Field(..., example="lok-sabha")
    name: str = Field(..., example="Lok Sabha")
    description: str = Field(..., example="Lower House of Indian Parliament")
    category: CommitteeCategory = Field(..., example="domestic")

    model_config = {
        "frozen": True,
    }


class CommitteeListResponse(BaseModel):
    success: bool = True
    committees: List[Committee]


class CommitteeResponse(BaseModel):
    success: bool = True
    committee: Committee
