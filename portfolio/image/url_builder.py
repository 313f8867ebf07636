# portfolio/image/url_builder.py

from typing import Optional
from urllib.parse import urlparse

CDN_HOST = "res.cloudinary.com"


def optimize_image_url(
    url: str,
    width: Optional[int] = None,
    height: Optional[int] = None,
    quality: int = 80,
    format: str = "webp",
    crop: str = "fill",
) -> str:
    """Insert Cloudinary transformation tokens into a delivery URL.

    Exposed for API consumers rendering images; the routers store and return
    URLs untouched. URLs on any other host are returned unchanged.
    """
    if not url or url.startswith("data:"):
        return url
    if urlparse(url).hostname != CDN_HOST or "/upload/" not in url:
        return url

    base, public_path = url.split("/upload/", 1)

    tokens = []
    if width:
        tokens.append(f"w_{width}")
    if height:
        tokens.append(f"h_{height}")
    tokens.append(f"q_{quality}")
    tokens.append(f"f_{format}")
    tokens.append(f"c_{crop}")

    return f"{base}/upload/{','.join(tokens)}/{public_path}"
