from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional

class Settings(BaseSettings):
    PROJECT_NAME: str = "PicMenu"
    VERSION: str = "1.0.0"
    API_STR: str = "/api"
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8000",
    ]
    LOG_LEVEL: str = "INFO"

    # Together AI (OpenAI-compatible endpoint)
    TOGETHER_API_KEY: str = ""
    TOGETHER_BASE_URL: str = "https://api.together.xyz/v1"

    # Helicone relay, only used when a key is configured
    HELICONE_API_KEY: Optional[str] = None
    HELICONE_BASE_URL: str = "https://together.helicone.ai/v1"

    # Models
    EXTRACTION_MODEL: str = "Qwen/Qwen2.5-VL-72B-Instruct"
    IMAGE_WIDTH: int = 1024
    IMAGE_HEIGHT: int = 768
    IMAGE_STEPS: int = 8

    # Batching (upstream allows ~57 requests per minute)
    IMAGE_BATCH_SIZE: int = 3
    IMAGE_BATCH_DELAY_SECONDS: float = 1.0
    MAX_DURATION_SECONDS: float = 60.0

    # MinIO
    MINIO_ENDPOINT: str = "localhost:9000"
    MINIO_PUBLIC_ENDPOINT: Optional[str] = None
    MINIO_ACCESS_KEY: str = "minioadmin"
    MINIO_SECRET_KEY: str = "minioadmin"
    MINIO_BUCKET: str = "picmenu"
    MINIO_SECURE: bool = False
    UPLOAD_URL_EXPIRES_SECONDS: int = 3600
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
