"""
Storefront API - FastAPI application

Exposes the catalog queries and the session cart over HTTP.
Run with: uvicorn storefront.app:app
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.commerce.client import get_commerce_client
from storefront.logging import get_logger
from storefront.routers import cart_router, products_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    client = get_commerce_client()
    logger.info("Storefront API started (backend: %s)", client.backend.name)
    yield
    await client.aclose()


app = FastAPI(title="Storefront API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(products_router)
app.include_router(cart_router)


@app.get("/api/health")
async def health_check():
    client = get_commerce_client()
    return {"status": "ok", "backend": client.backend.name}
