"""
Shared product definitions.
This module provides the Product schema and the sample catalog served by the API.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

# Seed data for products: (id, title, image_url, preview_url)
PRODUCTS_SEED_DATA = [
    (1, "Sample Album 1", "https://via.placeholder.com/400x400", "/audio/album1-sample.mp3"),
    (2, "Sample Album 2", "https://via.placeholder.com/400x400", "/audio/album2-sample.mp3"),
]


class Product(BaseModel):
    """Schema for a product (album) record."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str = Field(min_length=1)
    image_url: str = Field(alias="imageUrl")
    preview_url: str = Field(alias="previewUrl")


def sample_products() -> List[Product]:
    """
    Build the sample product list.
    A fresh list is returned on every call; nothing is cached between requests.
    """
    return [
        Product(id=product_id, title=title, image_url=image_url, preview_url=preview_url)
        for product_id, title, image_url, preview_url in PRODUCTS_SEED_DATA
    ]
