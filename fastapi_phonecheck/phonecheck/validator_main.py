from fastapi import FastAPI

from phonecheck.api.routes import validator_router
from phonecheck.core.config import settings
from phonecheck.core.logging_config import configure_logging
from phonecheck.db.session import create_tables

app = FastAPI(title=settings.validator_app_name, version="0.1.0")

app.include_router(validator_router)


@app.on_event("startup")
def _startup() -> None:
    configure_logging()
    if settings.db_create_tables:
        create_tables()


@app.get("/", tags=["health"])
async def root() -> dict[str, str]:
    return {"message": f"{settings.validator_app_name} ready"}
