# portfolio/models/registry.py
# importing the models registers them on Base.metadata before create_all

from portfolio.database import Base, engine
from portfolio.models.contact import Contact  # noqa: F401
from portfolio.models.experience import Experience  # noqa: F401
from portfolio.models.image import Image  # noqa: F401
from portfolio.models.profile import Profile  # noqa: F401
from portfolio.models.project import Project  # noqa: F401
from portfolio.models.site_settings import SiteSettings  # noqa: F401
from portfolio.models.skill import Skill  # noqa: F401
from portfolio.models.user import User  # noqa: F401


def create_all(bind=None) -> None:
    Base.metadata.create_all(bind=bind or engine)
