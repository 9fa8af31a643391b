import os
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
import uvicorn

from leasedesk import __version__
from leasedesk.config import DEBUG, APP_HOST, APP_PORT, LOG_FORMAT, LOG_LEVEL, WEB_DIR
from leasedesk.database.init import Base, engine
from leasedesk.responses.handlers import register_error_handlers
from leasedesk.routes import (
    auth_routes,
    building_routes,
    dashboard_routes,
    document_routes,
    invitation_routes,
    maintenance_routes,
    payment_routes,
    unit_routes,
    webhook_routes,
)
from leasedesk.utils.observability import setup_logging

setup_logging(LOG_LEVEL, LOG_FORMAT)
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)

app = FastAPI(title="LeaseDesk API", version=__version__, debug=DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(auth_routes.router)
app.include_router(building_routes.router)
app.include_router(unit_routes.router)
app.include_router(invitation_routes.router)
app.include_router(payment_routes.router)
app.include_router(webhook_routes.router)
app.include_router(maintenance_routes.router)
app.include_router(document_routes.router)
app.include_router(dashboard_routes.router)


@app.get("/api/v1/health")
def read_root():
    return {"name": "LeaseDesk API", "version": __version__}


# Mounted last so the API routes take precedence
if os.path.isdir(WEB_DIR):
    app.mount("/", StaticFiles(directory=WEB_DIR, html=True), name="web")
else:
    logger.warning(f"Web directory {WEB_DIR} not found, frontend will not be served")


if __name__ == "__main__":
    uvicorn.run("leasedesk.main:app", host=APP_HOST, port=APP_PORT, reload=DEBUG)
