"""
FastAPI application entry point
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ledger_master import __version__
from ledger_master.core.config import Settings
from ledger_master.core.logging import configure_logging
from ledger_master.db.init_db import init_db
from ledger_master.errors import LedgerMasterError

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    init_db()
    yield


app = FastAPI(
    title="Ledger Master API",
    description="Supplier/ledger account API",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Settings.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


@app.exception_handler(LedgerMasterError)
async def ledger_error_handler(request: Request, exc: LedgerMasterError):
    """Domain errors become ``{"message": ...}`` with the error's status"""
    return JSONResponse(status_code=exc.status_code or 500, content={"message": exc.message})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    log.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal Server Error", "error": str(exc)},
    )


@app.get("/")
async def root():
    return {"message": "Welcome to Ledger Master API", "version": __version__}


@app.get("/health")
async def health():
    """Liveness check"""
    return {"status": "ok"}


from ledger_master.api import auth, reference, suppliers, companies
app.include_router(auth.router)
app.include_router(reference.router)
app.include_router(suppliers.router)
app.include_router(companies.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=Settings.HOST, port=Settings.PORT)
