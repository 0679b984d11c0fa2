from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from riftbuilder.api import compare_router, health_router
from riftbuilder.config import settings

app = FastAPI(
    title=settings.app_name,
    version=pkg_version("riftbuilder"),
    debug=settings.debug,
)

app.include_router(compare_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Dashboard is served from a separate dev server
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
