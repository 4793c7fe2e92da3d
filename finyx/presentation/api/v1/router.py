from fastapi import APIRouter

from .config import config_router
from .dashboard import dashboard_router
from .sections import sections_router
from .transactions import transactions_router

router = APIRouter(prefix="/v1")

router.include_router(dashboard_router, tags=["Dashboard"])
router.include_router(transactions_router, tags=["Transactions"])
router.include_router(sections_router, tags=["Sections"])
router.include_router(config_router, tags=["Configuration"])
