from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import uvicorn

from . import routers
from .config import CORS_ORIGINS, LOG_LEVEL, HOST, PORT
from .database import init_db, check_db_connection

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

app = FastAPI(
    title="Wedplan API",
    description="Wedding planning: guests, events, RSVPs and the wedding website",
    version=API_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# (router module, url prefix). The rsvp routes and the public website routes
# need no token.
ROUTES = (
    (routers.dashboard, "dashboard"),
    (routers.event, "event"),
    (routers.households, "households"),
    (routers.guests, "guests"),
    (routers.invitations, "invitations"),
    (routers.questions, "questions"),
    (routers.gifts, "gifts"),
    (routers.guest_tags, "guest-tags"),
    (routers.users, "users"),
    (routers.website, "website"),
    (routers.rsvp, "rsvp"),
)

for module, prefix in ROUTES:
    app.include_router(module.router, prefix=f"/api/{prefix}", tags=[prefix])


@app.on_event("startup")
async def create_tables():
    logger.info(f"Starting Wedplan API {API_VERSION}")
    init_db()


@app.get("/")
async def root():
    return {"message": "Welcome to Wedplan API", "status": "running"}


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": "wedplan-api",
        "version": API_VERSION,
        "checks": check_db_connection(),
    }


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
