from fastapi import APIRouter, Depends, UploadFile, File
from fastapi.concurrency import run_in_threadpool
from picmenu.api.deps import get_storage_service
from picmenu.core.config import settings
from picmenu.schemas.menu import ErrorResponse, UploadResponse
from picmenu.services.storage_service import StorageService, validate_menu_image
import logging
import os

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Uploads"])

@router.post(
    "/upload",
    response_model=UploadResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def upload_menu(
    file: UploadFile = File(...),
    storage: StorageService = Depends(get_storage_service)
):
    content = await file.read()
    validate_menu_image(content, file.content_type, settings.MAX_UPLOAD_BYTES)

    filename = os.path.basename(file.filename or "") or "menu"
    # The MinIO client is blocking
    object_name = await run_in_threadpool(storage.upload_file, filename, content, file.content_type)
    url = await run_in_threadpool(storage.get_presigned_url, object_name)
    logger.info("Stored menu upload %s (%d bytes)", object_name, len(content))
    return UploadResponse(url=url, objectName=object_name)
