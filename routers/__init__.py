from fastapi import APIRouter

from . import demos
from . import status


router = APIRouter()

router.include_router(status.router, tags=["status"])
router.include_router(demos.router, prefix="/demos", tags=["demos"])
