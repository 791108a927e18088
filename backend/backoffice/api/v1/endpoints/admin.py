from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session
from typing import List, Optional
from backoffice import models, schemas
from backoffice.api import deps
from backoffice.core.exceptions import ServiceError
from backoffice.core.logger import setup_logger
from backoffice.services.account_service import account_service
from backoffice.services.category_service import category_service
from backoffice.services.product_service import product_service

router = APIRouter()

logger = setup_logger("api.admin")

@router.get("/products", response_model=schemas.Page[schemas.ProductListItem])
def read_products(
    query: schemas.ListQuery = Depends(deps.get_list_query),
    db: Session = Depends(deps.get_db),
    admin: models.Account = Depends(deps.require_admin)
):
    """
    Page through products with their current prices.
    """
    try:
        return product_service.get_product_list(db, query)
    except ServiceError as e:
        raise deps.to_http_exception(e)
    except Exception as e:
        logger.error(f"Error getting product list: {str(e)}", exc_info=True)
        raise deps.internal_error("Internal server error")

@router.post("/products", response_model=schemas.Product, status_code=201)
def create_product(
    product_id: str = Form(...),
    name: str = Form(...),
    category_id: str = Form(...),
    price: float = Form(..., ge=0),
    quantity: int = Form(0, ge=0),
    status: int = Form(1),
    featured: bool = Form(False),
    description: Optional[str] = Form(None),
    file: UploadFile = File(...),
    db: Session = Depends(deps.get_db),
    admin: models.Account = Depends(deps.require_admin)
):
    """
    Create a product with its thumbnail and first price.
    """
    try:
        data = schemas.ProductCreate(
            product_id=product_id,
            name=name,
            category_id=category_id,
            price=price,
            quantity=quantity,
            status=status,
            featured=featured,
            description=description
        )
        return product_service.create_product(db, file, data, admin.account_id)
    except ServiceError as e:
        raise deps.to_http_exception(e)
    except ValidationError as e:
        raise RequestValidationError(e.errors())
    except Exception as e:
        logger.error(f"Error creating product: {str(e)}", exc_info=True)
        raise deps.internal_error("Internal server error")

@router.put("/products/{product_id}", response_model=schemas.Product)
def edit_product(
    product_id: str,
    name: str = Form(...),
    category_id: str = Form(...),
    quantity: int = Form(0, ge=0),
    status: int = Form(1),
    featured: bool = Form(False),
    description: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(deps.get_db),
    admin: models.Account = Depends(deps.require_admin)
):
    """
    Replace a product's fields, optionally with a new thumbnail.
    """
    try:
        data = schemas.ProductUpdate(
            name=name,
            category_id=category_id,
            quantity=quantity,
            status=status,
            featured=featured,
            description=description
        )
        return product_service.edit_product(db, product_id, file, data)
    except ServiceError as e:
        raise deps.to_http_exception(e)
    except ValidationError as e:
        raise RequestValidationError(e.errors())
    except Exception as e:
        logger.error(f"Error editing product {product_id}: {str(e)}", exc_info=True)
        raise deps.internal_error("Internal server error")

@router.delete("/products/{product_id}")
def delete_product(
    product_id: str,
    db: Session = Depends(deps.get_db),
    admin: models.Account = Depends(deps.require_admin)
):
    """
    Delete a product that has never been ordered, with its prices and thumbnail.
    """
    try:
        return {"productId": product_service.delete_product(db, product_id)}
    except ServiceError as e:
        raise deps.to_http_exception(e)
    except Exception as e:
        logger.error(f"Error deleting product {product_id}: {str(e)}", exc_info=True)
        raise deps.internal_error("Internal server error")

@router.get("/products/{product_id}/prices", response_model=schemas.Page[schemas.PriceDetail])
def read_prices(
    product_id: str,
    query: schemas.ListQuery = Depends(deps.get_list_query),
    db: Session = Depends(deps.get_db),
    admin: models.Account = Depends(deps.require_admin)
):
    """
    Page through the price history of a product.
    """
    try:
        return product_service.get_price_list_of_product(db, product_id, query)
    except ServiceError as e:
        raise deps.to_http_exception(e)
    except Exception as e:
        logger.error(f"Error getting prices of product {product_id}: {str(e)}", exc_info=True)
        raise deps.internal_error("Internal server error")

@router.post("/products/{product_id}/prices", response_model=schemas.PriceDetail, status_code=201)
def add_price(
    product_id: str,
    price_in: schemas.PriceDetailCreate,
    db: Session = Depends(deps.get_db),
    admin: models.Account = Depends(deps.require_admin)
):
    """
    Schedule a new price. It becomes current once its appliedAt is reached.
    """
    try:
        return product_service.add_new_price(db, product_id, admin.account_id, price_in)
    except ServiceError as e:
        raise deps.to_http_exception(e)
    except Exception as e:
        logger.error(f"Error adding price to product {product_id}: {str(e)}", exc_info=True)
        raise deps.internal_error("Internal server error")

@router.delete("/prices/{price_id}")
def delete_price(
    price_id: int,
    db: Session = Depends(deps.get_db),
    admin: models.Account = Depends(deps.require_admin)
):
    """
    Cancel a price that has not been applied yet.
    """
    try:
        return {"priceDetailId": product_service.delete_new_price(db, price_id)}
    except ServiceError as e:
        raise deps.to_http_exception(e)
    except Exception as e:
        logger.error(f"Error deleting price {price_id}: {str(e)}", exc_info=True)
        raise deps.internal_error("Internal server error")

@router.get("/categories", response_model=List[schemas.Category])
def read_categories(db: Session = Depends(deps.get_db), admin: models.Account = Depends(deps.require_admin)):
    """
    List categories by name.
    """
    try:
        return category_service.get_all(db)
    except ServiceError as e:
        raise deps.to_http_exception(e)
    except Exception as e:
        logger.error(f"Error getting categories: {str(e)}", exc_info=True)
        raise deps.internal_error("Internal server error")

@router.post("/categories", response_model=schemas.Category, status_code=201)
def create_category(
    category_in: schemas.CategoryCreate,
    db: Session = Depends(deps.get_db),
    admin: models.Account = Depends(deps.require_admin)
):
    """
    Create a category.
    """
    try:
        return category_service.create(db, category=category_in)
    except ServiceError as e:
        raise deps.to_http_exception(e)
    except Exception as e:
        logger.error(f"Error creating category: {str(e)}", exc_info=True)
        raise deps.internal_error("Internal server error")

@router.post("/accounts", response_model=schemas.Account, status_code=201)
def create_account(
    account_in: schemas.AccountCreate,
    db: Session = Depends(deps.get_db),
    admin: models.Account = Depends(deps.require_admin)
):
    """
    Create a staff account.
    """
    try:
        return account_service.create(db, account=account_in)
    except ServiceError as e:
        raise deps.to_http_exception(e)
    except Exception as e:
        logger.error(f"Error creating account: {str(e)}", exc_info=True)
        raise deps.internal_error("Internal server error")
