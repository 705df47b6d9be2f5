"""
Storefront, FastAPI app
Démarrer : uvicorn storefront.api.main:app --reload --port 8001
"""
import logging, os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from store_builder import __version__

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="Storefront", description="WhatsApp store pages", version=__version__, docs_url="/docs")

_origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
app.add_middleware(CORSMiddleware, allow_origins=_origins or ["*"], allow_methods=["*"], allow_headers=["*"])


@app.on_event("startup")
def startup():
    from ..database import init_db
    init_db()
    log.info("DB initialisée (SQLite) : pages : %s", os.getenv("PAGE_STORE", "sql"))


@app.get("/health")
def health():
    return {"status": "ok", "service": "storefront", "version": __version__}


from .routes import stores, page_builder

app.include_router(stores.router)
app.include_router(page_builder.router)
