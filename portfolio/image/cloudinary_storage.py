# portfolio/image/cloudinary_storage.py

import io
import logging
from typing import Any, Dict, List, Optional

import cloudinary
import cloudinary.api
import cloudinary.uploader

from portfolio.config import CLOUDINARY_API_KEY, CLOUDINARY_API_SECRET, CLOUDINARY_CLOUD_NAME

# applied to every upload
DEFAULT_TRANSFORMATION = [
    {"width": 1200, "height": 800, "crop": "fill", "quality": "auto", "fetch_format": "auto"},
]


class CloudinaryStorage:
    """
    Thin adapter over the Cloudinary SDK.
    Every method returns the raw Cloudinary response dict and lets SDK errors propagate.
    """

    def __init__(
        self,
        cloud_name: Optional[str] = CLOUDINARY_CLOUD_NAME,
        api_key: Optional[str] = CLOUDINARY_API_KEY,
        api_secret: Optional[str] = CLOUDINARY_API_SECRET,
    ):
        cloudinary.config(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            secure=True,
        )
        self.logger = logging.getLogger("portfolio.image.cloudinary")

    def upload(self, data: bytes, *, folder: str, public_id: str) -> Dict[str, Any]:
        self.logger.debug("cloudinary_upload", extra={"folder": folder, "size": len(data)})
        return cloudinary.uploader.upload(
            io.BytesIO(data),
            folder=folder,
            public_id=public_id,
            transformation=DEFAULT_TRANSFORMATION,
            resource_type="auto",
        )

    def destroy(self, public_id: str) -> Dict[str, Any]:
        return cloudinary.uploader.destroy(public_id)

    def resource(self, public_id: str) -> Dict[str, Any]:
        return cloudinary.api.resource(public_id)

    def list_folder(self, folder: str, page_size: int = 500) -> List[Dict[str, Any]]:
        resources: List[Dict[str, Any]] = []
        cursor = None
        while True:
            options = {"type": "upload", "prefix": f"{folder}/", "max_results": page_size}
            if cursor:
                options["next_cursor"] = cursor
            page = cloudinary.api.resources(**options)
            resources.extend(page.get("resources", []))
            cursor = page.get("next_cursor")
            if not cursor:
                return resources
