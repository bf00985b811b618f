import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from jobly.config import settings
from jobly.database import Store, get_engine, init_db
from jobly.errors import JoblyError
from jobly.routers import jobs

logger = logging.getLogger("jobly")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    engine = get_engine(settings.db_path)
    init_db(engine)
    app.state.store = Store(engine)
    logger.info("Database ready at %s", settings.db_path)
    if settings.admin_token_hash is None:
        logger.warning("JOBLY_ADMIN_TOKEN_HASH is not set; admin routes will reject every request.")
    yield
    app.state.store.dispose()
    logger.info("Database connections closed.")


app = FastAPI(
    title="Jobly",
    description="Job postings for companies",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(JoblyError)
async def jobly_error_handler(request: Request, exc: JoblyError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Store error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(jobs.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}
