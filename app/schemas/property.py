from enum import Enum
from pydantic import BaseModel, ConfigDict
from typing import List, Optional

class PropertyFilter(str, Enum):
    SHOW_RENT = "rent"
    SHOW_BUY = "buy"
    SHOW_ALL = "all"

class FetchStatus(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    DONE = "done"

class Property(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    img_src: str
    type: str
    price: float

    @property
    def is_rental(self) -> bool:
        return self.type == "rent"

class FilterRequest(BaseModel):
    filter: PropertyFilter

class PropertyDetailResponse(BaseModel):
    property: Property
    display_price: str
    display_type: str

class OverviewStateResponse(BaseModel):
    status: Optional[FetchStatus] = None
    properties: List[Property] = []
    navigate_to: Optional[Property] = None
