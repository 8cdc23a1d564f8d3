import asyncio
import logging
from typing import Any, Awaitable, Callable, List

from picmenu.core.batching import run_in_batches
from picmenu.core.catalog import MODEL_IDS, FoodCategory, parse_category, parse_model
from picmenu.core.errors import InvalidRequestError
from picmenu.schemas.menu import MenuItem, ParseMenuRequest
from picmenu.services.image_service import build_image_prompt

logger = logging.getLogger(__name__)


class MenuProcessor:
    """
    Turns a menu photo URL into menu items with a generated picture each.

    Image generation runs in fixed-size batches with a pause in between to
    stay under the provider's requests-per-minute ceiling. An item whose
    image call fails is returned without ``menuImage``; the rest of the
    menu is unaffected.
    """

    def __init__(
        self,
        extractor: Any,
        image_generator: Any,
        batch_size: int = 3,
        batch_delay: float = 1.0,
        max_duration: float = 60.0,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.extractor = extractor
        self.image_generator = image_generator
        self.batch_size = batch_size
        self.batch_delay = batch_delay
        self.max_duration = max_duration
        self.sleep = sleep

    async def process(self, request: ParseMenuRequest) -> List[MenuItem]:
        if not request.menuUrl:
            raise InvalidRequestError("No menu URL provided")
        # Defaults apply only to absent fields; an explicit null is not a valid choice
        if "category" in request.model_fields_set and request.category is None:
            raise InvalidRequestError("Invalid category provided")
        category = parse_category(request.category)
        if "model" in request.model_fields_set and request.model is None:
            raise InvalidRequestError("Invalid model provided")
        model = parse_model(request.model)
        logger.info("Parsing menu %s (category=%s, model=%s)", request.menuUrl, category.value, model.value)

        return await asyncio.wait_for(
            self._run(request.menuUrl, category, MODEL_IDS[model]),
            timeout=self.max_duration,
        )

    async def _run(self, menu_url: str, category: FoodCategory, model_id: str) -> List[MenuItem]:
        items = await self.extractor.extract(menu_url)
        logger.info("Starting image generation for %d items in batches of %d", len(items), self.batch_size)

        async def illustrate(item: MenuItem) -> MenuItem:
            logger.debug("Generating image for %s", item.name)
            # Each call writes only to its own item
            item.menuImage = await self.image_generator.generate(build_image_prompt(item, category), model_id)
            return item

        outcomes = await run_in_batches(items, illustrate, self.batch_size, self.batch_delay, sleep=self.sleep)
        for item, outcome in zip(items, outcomes):
            if isinstance(outcome, Exception):
                logger.warning("Image generation failed for %r: %s", item.name, outcome)
            elif isinstance(outcome, BaseException):
                raise outcome
        return items
