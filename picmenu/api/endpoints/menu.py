from fastapi import APIRouter, Depends
from picmenu.api.deps import get_menu_processor
from picmenu.core.catalog import list_options
from picmenu.schemas.menu import ErrorResponse, ParseMenuRequest, ParseMenuResponse
from picmenu.services.menu_processor import MenuProcessor

router = APIRouter(tags=["Menu"])

@router.post(
    "/parseMenu",
    response_model=ParseMenuResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def parse_menu(
    payload: ParseMenuRequest,
    processor: MenuProcessor = Depends(get_menu_processor)
):
    menu = await processor.process(payload)
    return ParseMenuResponse(menu=menu)

@router.get("/options", response_model=dict)
async def get_options():
    return list_options()
