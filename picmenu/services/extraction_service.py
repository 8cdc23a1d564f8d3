import json
import logging
from typing import Any, List, Optional
from pydantic import ValidationError
from picmenu.core.errors import ExtractionError
from picmenu.schemas.menu import EXTRACTED_MENU_ADAPTER, MenuItem, extraction_json_schema

logger = logging.getLogger(__name__)

EXTRACTION_PROMPT = (
    "You are given an image of a menu. Extract each menu item and return them in JSON format. "
    "Include the name, price (if available), and description (if available - otherwise create "
    "a short one). Return only valid JSON."
)

class MenuExtractionService:
    def __init__(self, client: Any, model: str):
        self.client = client
        self.model = model
        self.schema = extraction_json_schema()

    async def extract(self, menu_url: str) -> List[MenuItem]:
        """Ask the vision model for the menu items shown at ``menu_url``."""
        output = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": EXTRACTION_PROMPT},
                        {"type": "image_url", "image_url": {"url": menu_url}},
                    ],
                }
            ],
            response_format={"type": "json_object", "schema": self.schema},
        )
        content = self._first_content(output)
        if not content:
            logger.error("Extraction model returned no content")
            raise ExtractionError()
        return self.parse_items(content)

    @staticmethod
    def _first_content(output: Any) -> Optional[str]:
        choices = getattr(output, "choices", None) or []
        if not choices:
            return None
        message = getattr(choices[0], "message", None)
        return getattr(message, "content", None)

    @staticmethod
    def parse_items(content: str) -> List[MenuItem]:
        """Parse the model's text into menu items or raise ``ExtractionError``."""
        text = content.strip()
        if text.startswith("```"):
            text = text.strip("`")
            if text.lower().startswith("json"):
                text = text[4:]
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            logger.error("Extraction output is not JSON: %.200s", content)
            raise ExtractionError()

        if not isinstance(data, list) or not data:
            logger.error("No menu items extracted from image")
            raise ExtractionError()

        try:
            extracted = EXTRACTED_MENU_ADAPTER.validate_python(data)
        except ValidationError as exc:
            logger.error("Extracted items do not match the menu schema: %s", exc)
            raise ExtractionError()

        logger.info("Extracted %d menu items", len(extracted))
        return [MenuItem(**item.model_dump()) for item in extracted]
