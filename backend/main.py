import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from backend.core import config
from backend.core.error_handlers import register_error_handlers
from backend.core.observability import add_request_logging, setup_logging
from backend.database import init_db
from backend.routes import course_routes, user_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.LOG_LEVEL)
    config.validate_runtime_config()
    try:
        init_db()
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL.')
        raise
    yield


app = FastAPI(title='Courses API', lifespan=lifespan)

# Middleware added last runs first: error mapping sits innermost.
register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

if config.ENABLE_REQUEST_LOGGING:
    add_request_logging(app)


@app.get('/')
def root():
    return {'message': 'Welcome to the REST API project!'}


api_router = APIRouter()
api_router.include_router(user_routes.router)
api_router.include_router(course_routes.router)

app.include_router(api_router, prefix='/api')
