from fastapi import APIRouter

from . import generator, health, validate

validator_router = APIRouter()
validator_router.include_router(health.router)
validator_router.include_router(validate.router)
validator_router.include_router(validate.router, prefix="/api")

presenter_router = APIRouter()
presenter_router.include_router(health.router)
presenter_router.include_router(generator.router)
