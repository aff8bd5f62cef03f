from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from .dispatch.views import router as dispatch
from .scripts.views import router as scripts

router = APIRouter(default_response_class=ORJSONResponse)

router.include_router(dispatch, prefix="/dispatch", tags=["dispatch"])
router.include_router(scripts, prefix="/script", tags=["scripts"])
