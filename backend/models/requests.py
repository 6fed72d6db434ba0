from typing import Any, Optional
from pydantic import BaseModel, ConfigDict
from config.constants import SEARCH_CONFIG

class SearchRequest(BaseModel):
    """
    Request body for /api/search. Values are forwarded as sent; an absent or
    falsy query is rejected by the route.
    """
    model_config = ConfigDict(extra="ignore")

    query: Any = None
    num: Any = SEARCH_CONFIG.DEFAULT_NUM_RESULTS

class AnalyzeRequest(BaseModel):
    """Request body for /api/analyze."""
    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "text": "According to NASA, global temperatures have increased by 1.1 degrees Celsius."
            }
        },
    )

    text: Optional[str] = None
