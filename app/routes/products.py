"""
Products API Routes (Read-only - sample data)
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app import schema

router = APIRouter(prefix="/api/products", tags=["products"])
logger = logging.getLogger(__name__)


@router.get("")
def list_products():
    """
    List all available products.
    Products are sample data and cannot be modified via API.
    """
    try:
        products = [product.model_dump(by_alias=True) for product in schema.sample_products()]
        return JSONResponse(content=products)
    except Exception:
        logger.exception("Error listing products")
        return JSONResponse(status_code=500, content={"message": "Internal server error"})
