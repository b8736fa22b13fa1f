from fastapi import APIRouter

from .health import health_router
from .reputation import reputation_router
from .loans import loans_router
from .merchants import merchants_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(reputation_router, tags=["Reputation"])
router.include_router(loans_router, tags=["Loans"])
router.include_router(merchants_router, tags=["Merchants"])
