# portfolio/image/image_router.py

from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from sqlalchemy.orm import Session

from portfolio.auth.security import require_admin
from portfolio.database import get_db
from portfolio.image.cloudinary_storage import CloudinaryStorage
from portfolio.image.image_service import (
    DEFAULT_FOLDER,
    MAX_UPLOAD_BYTES,
    ImageService,
    ImageStorageError,
    ImageValidationError,
)
from portfolio.responses import ok
from portfolio.routing import EnvelopeRoute
from portfolio.schemas.image_schema import ImageRead

NO_PUBLIC_ID = "No public ID provided"


@lru_cache
def get_storage() -> CloudinaryStorage:
    return CloudinaryStorage()


def get_image_service(
    db: Session = Depends(get_db),
    storage=Depends(get_storage),
) -> ImageService:
    return ImageService(storage, db)


upload_router = APIRouter(
    prefix="/api/upload",
    tags=["images"],
    route_class=EnvelopeRoute,
    dependencies=[Depends(require_admin)],
)
images_router = APIRouter(
    prefix="/api/images",
    tags=["images"],
    route_class=EnvelopeRoute,
    dependencies=[Depends(require_admin)],
)
# /api/admin/* is also covered by AdminGuardMiddleware
admin_router = APIRouter(
    prefix="/api/admin/images",
    tags=["images"],
    route_class=EnvelopeRoute,
    dependencies=[Depends(require_admin)],
)


# ==========================
#  UPLOAD
# ==========================
@upload_router.post("", summary="Upload image")
def upload_image(
    file: Optional[UploadFile] = File(None),
    folder: str = Form(DEFAULT_FOLDER),
    service: ImageService = Depends(get_image_service),
):
    if file is None:
        raise HTTPException(400, "No file provided")

    # read one byte past the limit so oversize files are detected without buffering them whole
    data = file.file.read(MAX_UPLOAD_BYTES + 1)
    try:
        service.validate(file.content_type, len(data))
    except ImageValidationError as exc:
        raise HTTPException(400, str(exc))

    try:
        upload, warning = service.upload(data, folder or DEFAULT_FOLDER, file.filename)
    except ImageStorageError as exc:
        raise HTTPException(500, str(exc))

    return ok(upload, message="Image uploaded successfully", warning=warning)


@upload_router.get("", summary="Get image info")
def get_image_info(
    public_id: Optional[str] = Query(None, alias="publicId"),
    service: ImageService = Depends(get_image_service),
):
    if not public_id:
        raise HTTPException(400, NO_PUBLIC_ID)
    try:
        return ok(service.info(public_id))
    except ImageStorageError as exc:
        raise HTTPException(500, str(exc))


@upload_router.delete("", summary="Delete image")
def delete_image(
    public_id: Optional[str] = Query(None, alias="publicId"),
    service: ImageService = Depends(get_image_service),
):
    if not public_id:
        raise HTTPException(400, NO_PUBLIC_ID)
    try:
        service.delete(public_id)
    except ImageStorageError as exc:
        raise HTTPException(500, str(exc))
    return ok(message="Image deleted successfully")


# ==========================
#  MIRROR
# ==========================
@images_router.get("", summary="Fetch images")
def list_images(
    folder: str = DEFAULT_FOLDER,
    max_results: int = Query(50, ge=1, alias="maxResults"),
    service: ImageService = Depends(get_image_service),
):
    images = [ImageRead.model_validate(img) for img in service.list(folder, max_results)]
    return ok(images, total=len(images))


@admin_router.post("/reconcile", summary="Reconcile images")
def reconcile_images(
    folder: str = DEFAULT_FOLDER,
    service: ImageService = Depends(get_image_service),
):
    try:
        report = service.reconcile(folder)
    except ImageStorageError as exc:
        raise HTTPException(500, str(exc))
    return ok(report, message="Image mirror reconciled")
