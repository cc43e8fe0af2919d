from __future__ import annotations

import pytest

from app.core.exceptions import NotFoundException
from app.repositories.pagination import PageRequest
from app.services.scrap_service import ScrapService
from tests.conftest import EXISTENT_EMAIL


async def test_lists_only_active_products_of_user(db):
    products = await ScrapService(db).get_products(EXISTENT_EMAIL, PageRequest(0, 10))

    assert [p.scrap_id for p in products.content] == [2, 1]
    assert products.has_next is False

    lamp = products.content[1]
    assert lamp.title == "Desk lamp"
    assert lamp.price == "29,000"
    assert lamp.site_name == "Example Shop"
    assert lamp.page_url == "https://shop.example.com/items/1"


async def test_products_page_with_has_next(db):
    products = await ScrapService(db).get_products(EXISTENT_EMAIL, PageRequest(0, 1))

    assert [p.scrap_id for p in products.content] == [2]
    assert products.has_next is True


async def test_unknown_user_is_not_found(db):
    with pytest.raises(NotFoundException):
        await ScrapService(db).get_products("nobody@naver.com", PageRequest(0, 10))
