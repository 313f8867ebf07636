# portfolio/scripts/reconcile_images.py
"""Rebuild the Image mirror from Cloudinary: python -m portfolio.scripts.reconcile_images [folder]"""

import logging
import sys

from portfolio.database import SessionLocal
from portfolio.image.cloudinary_storage import CloudinaryStorage
from portfolio.image.image_service import DEFAULT_FOLDER, ImageService
from portfolio.models.registry import create_all


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")
    folder = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_FOLDER

    create_all()
    db = SessionLocal()
    try:
        report = ImageService(CloudinaryStorage(), db).reconcile(folder)
    finally:
        db.close()

    print(
        f"Reconciled '{report.folder}': "
        f"{report.created} created, {report.updated} updated, {report.deleted} deleted"
    )


if __name__ == "__main__":
    main()
