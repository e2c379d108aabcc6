from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from phonecheck.api.routes import presenter_router
from phonecheck.core.config import settings
from phonecheck.core.logging_config import configure_logging
from phonecheck.db.session import create_tables

app = FastAPI(title=settings.app_name, version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(presenter_router)


@app.on_event("startup")
def _startup() -> None:
    configure_logging()
    if settings.db_create_tables:
        create_tables()
