from fastapi import FastAPI
import logging
import uvicorn
from fastapi.middleware.cors import CORSMiddleware
from slowapi.middleware import SlowAPIMiddleware
from app.core.config import settings
from app.core.database import init_db
from app.core.middleware import SecurityHeadersMiddleware, limiter, register_exception_handlers
from app.api import api_router

# Setup logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Sports Stats API")
app.state.limiter = limiter

# Credentialed requests are only accepted in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.is_production,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(SlowAPIMiddleware)

register_exception_handlers(app)

# Ensure database tables are created
@app.on_event("startup")
def startup():
    init_db()
    logger.info(f"✅ Database connected and tables created. Serving on {settings.URL}:{settings.PORT}")

@app.get("/")
def home():
    return {"message": "Welcome to the Sports Stats API"}

# Include all API routes
app.include_router(api_router)


def run():
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)
