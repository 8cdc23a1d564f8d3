import logging
from typing import Any
from picmenu.core.catalog import CATEGORY_PROMPTS, FoodCategory
from picmenu.schemas.menu import ExtractedMenuItem, MenuImage

logger = logging.getLogger(__name__)

QUALITY_DIRECTIVES = "No background blur, crisp details, high-resolution food photography, color-accurate."
NEGATIVE_DIRECTIVES = "No vignette, no grain, no filters, no frame, no text, no watermark."

def build_image_prompt(item: ExtractedMenuItem, category: FoodCategory) -> str:
    return "\n".join([
        f"{item.name} - {item.description}.",
        f"{CATEGORY_PROMPTS[category]}.",
        QUALITY_DIRECTIVES,
        NEGATIVE_DIRECTIVES,
    ])

class ImageGenerationService:
    def __init__(self, client: Any, width: int = 1024, height: int = 768, steps: int = 8):
        self.client = client
        self.width = width
        self.height = height
        self.steps = steps

    async def generate(self, prompt: str, model_id: str) -> MenuImage:
        """Render one image for ``prompt`` and return it base64-encoded."""
        response = await self.client.images.generate(
            model=model_id,
            prompt=prompt,
            n=1,
            response_format="base64",
            extra_body={"width": self.width, "height": self.height, "steps": self.steps},
        )
        data = getattr(response, "data", None) or []
        b64 = getattr(data[0], "b64_json", None) if data else None
        if not b64:
            raise ValueError(f"Image model {model_id} returned no image data")
        return MenuImage(base64Image=b64)
