from typing import Optional
from pydantic import BaseModel, Field


# ------------------------------------------------------------------------------
# Schemas
# ------------------------------------------------------------------------------

class LookupTypeArgs(BaseModel):
    type_name: str = Field(..., description="Type name to search for (e.g., 'TxEip1559', 'BlockId', 'Address', 'PrivateKeySigner')")

class SearchResourcesArgs(BaseModel):
    query: str = Field(..., description="Free-text query: type name, concept, or error message")
    max_results: Optional[int] = Field(5, description="Maximum number of results to return (default 5)")

class GetResourceArgs(BaseModel):
    uri: str = Field(..., description="Resource URI to fetch (e.g., 'alloy://consensus/transactions'). Pass 'list' to see all available URIs.")
