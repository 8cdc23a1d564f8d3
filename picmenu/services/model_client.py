import logging
from typing import Dict
from openai import AsyncOpenAI
from picmenu.core.config import Settings

logger = logging.getLogger(__name__)

def relay_headers(helicone_api_key: str) -> Dict[str, str]:
    return {
        "Helicone-Auth": f"Bearer {helicone_api_key}",
        "Helicone-Property-MENU": "true",
    }

def build_model_client(config: Settings) -> AsyncOpenAI:
    """Client for the Together AI API, routed through Helicone when a relay key is set."""
    options = {"api_key": config.TOGETHER_API_KEY, "base_url": config.TOGETHER_BASE_URL}
    if config.HELICONE_API_KEY:
        options["base_url"] = config.HELICONE_BASE_URL
        options["default_headers"] = relay_headers(config.HELICONE_API_KEY)
        logger.info("Routing model requests through %s", config.HELICONE_BASE_URL)
    return AsyncOpenAI(**options)
