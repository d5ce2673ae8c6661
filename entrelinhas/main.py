"""Entrelinhas API - FastAPI application."""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from entrelinhas.api.api import api_router
from entrelinhas.core.config import settings
from entrelinhas.core.errors import AppError
from entrelinhas.db.client import create_client, ensure_indexes, get_db


def _log(msg: str, *args):
    print(f"[Backend] {msg}", *args)


@asynccontextmanager
async def lifespan(app: FastAPI):
    client = create_client()
    app.state.mongo_client = client
    app.state.db = client[settings.MONGO_DB_NAME]
    app.state.indexes_ready = False
    try:
        await ensure_indexes(app.state.db)
        app.state.indexes_ready = True
        _log("Database: OK")
    except PyMongoError as e:
        _log("WARNING: Database connection failed:", e)
        _log("Ensure MongoDB is reachable at MONGO_URI; indexes will be retried on the next request")
    _log("Running - use http://localhost:8000 from this computer")
    _log("API: / and /api | Docs: /docs | Health: /health | Ready (DB): /ready")
    yield
    client.close()


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api_router)
# Serverless deployments are reached under /api.
app.include_router(api_router, prefix="/api", include_in_schema=False)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Requisição inválida"})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "Rota não encontrada"})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(PyMongoError)
async def database_error_handler(request: Request, exc: PyMongoError):
    _log(f"Database error on {request.method} {request.url.path}:", exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Erro no servidor"})


@app.get("/")
async def root():
    return {
        "name": settings.APP_NAME,
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/favicon.ico", include_in_schema=False)
async def favicon():
    return Response(status_code=204)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/ready")
async def ready(request: Request):
    """Health check including DB - use to verify backend is fully operational."""
    try:
        db = await get_db(request)
        await db.command("ping")
        return {"status": "ok", "database": "connected"}
    except (AttributeError, PyMongoError) as e:
        return JSONResponse(
            status_code=503,
            content={"status": "error", "database": str(e)},
        )
