from pydantic import BaseModel, Field, TypeAdapter, field_validator, model_validator
from typing import Any, Dict, List, Optional

class ParseMenuRequest(BaseModel):
    menuUrl: Optional[str] = None
    category: Optional[str] = None
    model: Optional[str] = None

class MenuImage(BaseModel):
    base64Image: str

class ExtractedMenuItem(BaseModel):
    """Shape the extraction model is asked to produce for every item."""
    name: str = Field(..., description="The name of the menu item")
    price: str = Field(..., description="The price of the menu item")
    description: str = Field(
        ...,
        description=(
            "The description of the menu item. If this doesn't exist, "
            "please write a short one sentence description."
        ),
    )

    @model_validator(mode='before')
    @classmethod
    def fill_optional_text(cls, data):
        # Unpriced items (market price) and items without a description still belong on the menu
        if isinstance(data, dict):
            data = dict(data)
            for key in ("price", "description"):
                if data.get(key) is None:
                    data[key] = ""
        return data

    @field_validator('price', mode='before')
    def stringify_price(cls, v):
        # Models occasionally emit bare numbers for prices
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

class MenuItem(ExtractedMenuItem):
    menuImage: Optional[MenuImage] = None

class ParseMenuResponse(BaseModel):
    menu: List[MenuItem]

class ErrorResponse(BaseModel):
    error: str

class UploadResponse(BaseModel):
    url: str
    objectName: str

EXTRACTED_MENU_ADAPTER = TypeAdapter(List[ExtractedMenuItem])

def extraction_json_schema() -> Dict[str, Any]:
    return EXTRACTED_MENU_ADAPTER.json_schema()
