from fastapi import APIRouter, Depends

from phonecheck.api.deps import get_store
from phonecheck.db.store import NumberStore

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/ping")
async def ping() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/store")
def store_status(store: NumberStore = Depends(get_store)) -> dict[str, str]:
    # get_store 에서 연결 확인이 실패하면 503
    return {"status": "ok", "store": store.session.get_bind().dialect.name}
