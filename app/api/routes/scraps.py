from fastapi import APIRouter, Depends

from app.api.deps import get_current_email
from app.api.routes.boards import page_request
from app.repositories.pagination import PageRequest
from app.schemas.common import ApiResponse, SliceResponse
from app.schemas.scrap import GetProductResponse
from app.services.scrap_service import ScrapService, get_scrap_service

router = APIRouter(prefix="/v1/scraps", tags=["scraps"])


@router.get("/products", response_model=ApiResponse[SliceResponse[GetProductResponse]])
async def list_products(
    pageable: PageRequest = Depends(page_request),
    email: str = Depends(get_current_email),
    service: ScrapService = Depends(get_scrap_service),
):
    """List the caller's product scraps, newest first."""
    products = await service.get_products(email, pageable)
    return ApiResponse.success(SliceResponse[GetProductResponse].of(products))
