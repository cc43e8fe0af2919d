from typing import Optional

from pydantic import BaseModel


class GetProductResponse(BaseModel):
    # Common scrap fields
    scrap_id: int
    description: Optional[str] = None
    page_url: str
    site_name: Optional[str] = None
    thumbnail_url: Optional[str] = None
    title: Optional[str] = None

    # Product fields
    price: Optional[str] = None

    @classmethod
    def of(cls, product) -> "GetProductResponse":
        return cls(
            scrap_id=product.id,
            description=product.description,
            page_url=product.page_url,
            site_name=product.site_name,
            thumbnail_url=product.thumbnail_url,
            title=product.title,
            price=product.price,
        )
