# portfolio/main.py

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio.config import FRONTEND_ORIGIN, LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger("portfolio")

# ---------------- DATABASE INIT ----------------
from portfolio.database import engine  # noqa: E402
from portfolio.models.registry import create_all  # noqa: E402


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("database_init")
    create_all(engine)
    yield
    engine.dispose()
    logger.info("database_disposed")


app = FastAPI(title="Portfolio CMS API", lifespan=lifespan)

# ---------------- AUTH GUARD / ERRORS ----------------
from portfolio.auth.security import AdminGuardMiddleware  # noqa: E402
from portfolio.responses import install_exception_handlers, ok  # noqa: E402

app.add_middleware(AdminGuardMiddleware)
install_exception_handlers(app)

# ---------------- CORS ----------------
# added last so it wraps the guard and answers preflights
origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

if FRONTEND_ORIGIN:
    origins.append(FRONTEND_ORIGIN)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------- ROUTERS ----------------
from portfolio.analytics.analytics_router import router as analytics_router  # noqa: E402
from portfolio.auth.auth_router import router as auth_router  # noqa: E402
from portfolio.contact.contact_router import public_router as contact_router  # noqa: E402
from portfolio.contact.contact_router import router as contacts_router  # noqa: E402
from portfolio.experience.experience_router import router as experience_router  # noqa: E402
from portfolio.image.image_router import admin_router as image_admin_router  # noqa: E402
from portfolio.image.image_router import images_router, upload_router  # noqa: E402
from portfolio.profile.profile_router import router as profile_router  # noqa: E402
from portfolio.project.project_router import router as project_router  # noqa: E402
from portfolio.settings.settings_router import router as settings_router  # noqa: E402
from portfolio.sitemap.sitemap_router import router as sitemap_router  # noqa: E402
from portfolio.skill.skill_router import router as skill_router  # noqa: E402

app.include_router(auth_router)
app.include_router(project_router)
app.include_router(skill_router)
app.include_router(experience_router)
app.include_router(profile_router)
app.include_router(contact_router)
app.include_router(contacts_router)
app.include_router(settings_router)
app.include_router(upload_router)
app.include_router(images_router)
app.include_router(image_admin_router)
app.include_router(analytics_router)
app.include_router(sitemap_router)


# ---------------- ROOT ----------------
@app.get("/")
def read_root():
    return ok({"service": "portfolio-api", "status": "running"})


def run() -> None:
    import os

    import uvicorn

    uvicorn.run("portfolio.main:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")))


if __name__ == "__main__":
    run()
