from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from fitservice.app.core.logging import configure_logging
from fitservice.app.core.config import settings
from fitservice.app.core.errors import http_error_handler, unhandled_error_handler
from fitservice.app.services.transforms import TRANSFORMS
from fitservice.app.api.v1.result_routes import router as result_router

configure_logging(settings.log_level())
app = FastAPI(title=settings.APP_TITLE)
app.add_exception_handler(StarletteHTTPException, http_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

@app.get("/health")
def health():
    return {
        "status": "ok",
        "fixed_transform": settings.fixed_transform().value,
        "transforms": len(TRANSFORMS),
    }

app.include_router(result_router, prefix=settings.API_PREFIX)
