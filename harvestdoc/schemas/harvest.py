"""
Pydantic schemas for the HTTP export endpoint.
"""
from typing import Optional
from pydantic import BaseModel


class HarvestRequest(BaseModel):
    """Body of POST /: which Harvest API to export."""

    url: Optional[str] = ""
    token: Optional[str] = ""
