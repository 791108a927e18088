from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from backoffice import schemas
from backoffice.api import deps
from backoffice.core.exceptions import ServiceError
from backoffice.core.logger import setup_logger
from backoffice.services.file_service import file_service
from backoffice.services.order_service import order_service
from backoffice.services.product_service import product_service

router = APIRouter()

logger = setup_logger("api.public")

@router.get("/image/{image_id}")
def get_image(image_id: str, db: Session = Depends(deps.get_db)):
    """
    Serve a stored thumbnail.
    """
    try:
        image = file_service.get_image(db, image_id)
        return Response(content=image.data, media_type=image.content_type)
    except ServiceError as e:
        raise deps.to_http_exception(e)
    except Exception as e:
        logger.error(f"Error getting image {image_id}: {str(e)}", exc_info=True)
        raise deps.internal_error("Internal server error")

@router.get("/product/{product_id}", response_model=schemas.Product)
def get_product(product_id: str, db: Session = Depends(deps.get_db)):
    """
    Get a product with its current price.
    """
    try:
        return product_service.get_product(db, product_id)
    except ServiceError as e:
        raise deps.to_http_exception(e)
    except Exception as e:
        logger.error(f"Error getting product {product_id}: {str(e)}", exc_info=True)
        raise deps.internal_error("Internal server error")

@router.get("/order/{order_id}", response_model=schemas.Order)
def get_order(order_id: int, db: Session = Depends(deps.get_db)):
    """
    Get an order with its lines, e.g. for the customer's confirmation page.
    """
    try:
        return order_service.get_order(db, order_id)
    except ServiceError as e:
        raise deps.to_http_exception(e)
    except Exception as e:
        logger.error(f"Error getting order {order_id}: {str(e)}", exc_info=True)
        raise deps.internal_error("Internal server error")
