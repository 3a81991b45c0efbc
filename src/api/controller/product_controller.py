"""HTTP controller for the add-product form."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.clients.interfaces import DocumentStoreInterface, StorageInterface
from src.form import ProductFormState
from src.models import Category, Failed, FailureStage, ImageFile, Succeeded
from src.services import NotificationService, ProductSubmissionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])

FAILURE_STATUS_CODES = {
    FailureStage.MISSING_IMAGE: status.HTTP_400_BAD_REQUEST,
    FailureStage.UPLOAD: status.HTTP_502_BAD_GATEWAY,
    FailureStage.WRITE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ProductRecordResponse(BaseModel):
    """Product document as persisted."""

    id: str
    name: str
    shortDesc: str
    description: str
    category: str
    price: float
    imageUrl: str


class ProductSubmissionResponse(BaseModel):
    """Outcome of one add-product submission."""

    status: str  # "success" or "error"
    message: str
    price: str  # normalized display price at the time of submission
    record: Optional[ProductRecordResponse] = None


def get_storage(request: Request) -> StorageInterface:
    return request.app.state.storage


def get_document_store(request: Request) -> DocumentStoreInterface:
    return request.app.state.document_store


def get_currency_symbol(request: Request) -> str:
    return request.app.state.currency_symbol


def get_image_prefix(request: Request) -> str:
    return request.app.state.image_prefix


def get_products_collection(request: Request) -> str:
    return request.app.state.products_collection


@router.get("/categories")
async def list_categories() -> list[str]:
    """Categories accepted by the form, default first."""
    return [category.value for category in Category]


@router.post("", response_model=ProductSubmissionResponse, status_code=status.HTTP_201_CREATED)
async def add_product(
    title: str = Form(""),
    short_description: str = Form(""),
    description: str = Form(""),
    price: str = Form(""),
    category: Category = Form(Category.CHAIR),
    image: Optional[UploadFile] = File(None),
    storage: StorageInterface = Depends(get_storage),
    document_store: DocumentStoreInterface = Depends(get_document_store),
    currency_symbol: str = Depends(get_currency_symbol),
    image_prefix: str = Depends(get_image_prefix),
    collection: str = Depends(get_products_collection),
):
    """
    Fill a fresh add-product form from the posted fields and submit it.

    Returns 201 with the stored record on success. Missing image, upload
    failure and write failure map to 400, 502 and 500 respectively, with the
    same message the form would show.
    """
    form = ProductFormState(currency_symbol=currency_symbol)
    form.set_title(title)
    form.set_short_description(short_description)
    form.set_description(description)
    form.set_price(price)
    form.set_category(category)

    if image is not None and image.filename:
        form.set_image(ImageFile(
            filename=image.filename,
            content=await image.read(),
            content_type=image.content_type,
        ))

    display_price = form.display_price
    notifications = NotificationService()
    service = ProductSubmissionService(
        storage,
        document_store,
        notifications,
        collection=collection,
        image_prefix=image_prefix,
    )
    logger.info(f"Submitting product '{title}' in category {category.value}")
    outcome = await service.submit(form)

    if isinstance(outcome, Succeeded):
        return ProductSubmissionResponse(
            status="success",
            message=notifications.drain()[-1].message,
            price=display_price,
            record=ProductRecordResponse(**outcome.record.to_document()),
        )

    if isinstance(outcome, Failed):
        body = ProductSubmissionResponse(status="error", message=outcome.reason, price=display_price)
        return JSONResponse(status_code=FAILURE_STATUS_CODES[outcome.stage], content=body.model_dump())

    raise RuntimeError(f"Submission ended in non-terminal state {outcome!r}")
