# portfolio/image/image_service.py

import logging
import os
import time
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio.models.image import Image
from portfolio.schemas.image_schema import ImageUpload, ReconcileReport
from portfolio.store import StoreError, commit

MAX_UPLOAD_BYTES = 5 * 1024 * 1024
DEFAULT_FOLDER = "portfolio"


class ImageServiceError(Exception):
    pass


class ImageValidationError(ImageServiceError):
    pass


class ImageStorageError(ImageServiceError):
    """The object store rejected or failed the call; message comes from upstream."""


class ImageService:
    """
    Keeps the object store and the local Image mirror in step.
    The object store is the source of truth: once an upstream call succeeds,
    a failing mirror write is logged and the call still succeeds.
    """

    def __init__(self, storage, db: Session):
        self.storage = storage
        self.db = db
        self.logger = logging.getLogger("portfolio.image")

    # -------------------------
    # Validation
    # -------------------------

    @staticmethod
    def validate(content_type: Optional[str], size: int) -> None:
        if not content_type or not content_type.startswith("image/"):
            raise ImageValidationError("Only image files are allowed")
        if size > MAX_UPLOAD_BYTES:
            raise ImageValidationError("File size must be less than 5MB")

    # -------------------------
    # Object store operations
    # -------------------------

    def upload(self, data: bytes, folder: str, filename: str) -> Tuple[ImageUpload, Optional[str]]:
        """Upload and mirror. Returns the upload plus a warning when the mirror write failed."""
        stem = os.path.splitext(os.path.basename(filename or "image"))[0] or "image"
        public_id = f"{int(time.time() * 1000)}-{stem}"

        start = time.time()
        try:
            result = self.storage.upload(data, folder=folder, public_id=public_id)
        except Exception as exc:
            self.logger.exception("image_upload_failed", extra={"folder": folder})
            raise ImageStorageError(str(exc) or "Upload failed") from exc

        upload = ImageUpload(
            public_id=result["public_id"],
            secure_url=result["secure_url"],
            width=result.get("width"),
            height=result.get("height"),
            format=result.get("format"),
            bytes=result.get("bytes"),
        )
        self.logger.info(
            "image_uploaded",
            extra={"public_id": upload.public_id, "elapsed_seconds": round(time.time() - start, 3)},
        )

        try:
            self.db.add(Image(folder=folder, **upload.model_dump()))
            commit(self.db)
        except (SQLAlchemyError, StoreError):
            self.db.rollback()
            self.logger.exception("image_mirror_insert_failed", extra={"public_id": upload.public_id})
            return upload, "Image uploaded but its metadata could not be saved"

        return upload, None

    def delete(self, public_id: str) -> None:
        try:
            result = self.storage.destroy(public_id)
        except Exception as exc:
            self.logger.exception("image_delete_failed", extra={"public_id": public_id})
            raise ImageStorageError(str(exc) or "Delete failed") from exc

        if result.get("result") != "ok":
            raise ImageStorageError(f"Delete failed: {result.get('result', 'unknown error')}")

        try:
            self.db.query(Image).filter(Image.public_id == public_id).delete()
            commit(self.db)
        except (SQLAlchemyError, StoreError):
            self.db.rollback()
            self.logger.exception("image_mirror_delete_failed", extra={"public_id": public_id})

        self.logger.info("image_deleted", extra={"public_id": public_id})

    def info(self, public_id: str) -> Dict[str, Any]:
        try:
            return self.storage.resource(public_id)
        except Exception as exc:
            self.logger.exception("image_info_failed", extra={"public_id": public_id})
            raise ImageStorageError(str(exc) or "Failed to get image info") from exc

    # -------------------------
    # Mirror
    # -------------------------

    def list(self, folder: str = DEFAULT_FOLDER, max_results: int = 50) -> List[Image]:
        return (
            self.db.query(Image)
            .filter(Image.folder == folder)
            .order_by(Image.created_at.desc())
            .limit(max_results)
            .all()
        )

    def reconcile(self, folder: str = DEFAULT_FOLDER) -> ReconcileReport:
        """Rebuild the mirror for ``folder`` from the object store."""
        try:
            remote = self.storage.list_folder(folder)
        except Exception as exc:
            self.logger.exception("image_reconcile_list_failed", extra={"folder": folder})
            raise ImageStorageError(str(exc) or "Failed to list images") from exc

        report = ReconcileReport(folder=folder)
        local = {img.public_id: img for img in self.db.query(Image).filter(Image.folder == folder)}
        seen = set()

        for item in remote:
            public_id = item["public_id"]
            seen.add(public_id)
            values = {
                "secure_url": item["secure_url"],
                "width": item.get("width"),
                "height": item.get("height"),
                "format": item.get("format"),
                "bytes": item.get("bytes"),
                "folder": folder,
            }
            row = local.get(public_id)
            if row is None:
                row = self.db.query(Image).filter(Image.public_id == public_id).first()
            if row is None:
                self.db.add(Image(public_id=public_id, **values))
                report.created += 1
            elif any(getattr(row, k) != v for k, v in values.items()):
                for k, v in values.items():
                    setattr(row, k, v)
                report.updated += 1

        for public_id, row in local.items():
            if public_id not in seen:
                self.db.delete(row)
                report.deleted += 1

        commit(self.db)
        self.logger.info(
            "image_reconcile_done",
            extra={
                "folder": folder,
                "rows_created": report.created,
                "rows_updated": report.updated,
                "rows_deleted": report.deleted,
            },
        )
        return report
