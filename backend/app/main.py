import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api_models import HealthPayload
from .auth_routes import router as auth_router
from .config import get_settings
from .context import AppContext, build_context, get_app_context
from .logging_config import configure_logging
from .match_routes import router as match_router
from .profile_routes import router as profile_router


configure_logging()
logger = logging.getLogger(__name__)

settings_snapshot = get_settings()
app = FastAPI(title=settings_snapshot.app_name, version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings_snapshot.cors_origin_list,
    allow_credentials=settings_snapshot.cors_origin_list != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.context = build_context(settings_snapshot)
app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(match_router)

logger.info("Backend starting; seed demo data: %s", settings_snapshot.seed_demo_data)
logger.info("Session identity header: %s", settings_snapshot.user_header)


@app.get("/healthz", response_model=HealthPayload)
def health(context: AppContext = Depends(get_app_context)) -> HealthPayload:
    return HealthPayload(
        status="ok",
        users=len(context.identity_store),
        interests=len(context.interest_catalog),
    )
