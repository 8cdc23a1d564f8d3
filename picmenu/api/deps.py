from functools import lru_cache
from picmenu.core.config import settings
from picmenu.services.extraction_service import MenuExtractionService
from picmenu.services.image_service import ImageGenerationService
from picmenu.services.menu_processor import MenuProcessor
from picmenu.services.model_client import build_model_client
from picmenu.services.storage_service import StorageService

@lru_cache()
def get_menu_processor() -> MenuProcessor:
    client = build_model_client(settings)
    return MenuProcessor(
        extractor=MenuExtractionService(client, settings.EXTRACTION_MODEL),
        image_generator=ImageGenerationService(
            client,
            width=settings.IMAGE_WIDTH,
            height=settings.IMAGE_HEIGHT,
            steps=settings.IMAGE_STEPS,
        ),
        batch_size=settings.IMAGE_BATCH_SIZE,
        batch_delay=settings.IMAGE_BATCH_DELAY_SECONDS,
        max_duration=settings.MAX_DURATION_SECONDS,
    )

@lru_cache()
def get_storage_service() -> StorageService:
    return StorageService(settings)
