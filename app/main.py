# app/main.py
import os
import time
from typing import List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from .core import ProductIn
from .models import Product
from .logic import (
    list_products_logic, create_product_logic, update_product_logic,
    delete_product_logic, reset_all_logic
)

app = FastAPI(title="shopdemo inventory backend (in-memory)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    latency = time.time() - start_time
    logger.info(
        "{} {} -> {} ({:.1f} ms)",
        request.method, request.url.path, response.status_code, latency * 1000,
    )
    return response


@app.get("/health")
async def health():
    return {"status": "healthy"}

# ---------------------------
# Product endpoints
# ---------------------------
@app.get("/products", response_model=List[Product], response_model_exclude_none=True)
async def list_products():
    return await list_products_logic()

@app.post("/products", response_model=Product, response_model_exclude_none=True, status_code=201)
async def create_product(payload: ProductIn):
    return await create_product_logic(payload)

@app.put("/products/{product_id}", response_model=Product, response_model_exclude_none=True)
async def update_product(product_id: str, payload: ProductIn):
    return await update_product_logic(product_id, payload)

@app.delete("/products/{product_id}")
async def delete_product(product_id: str):
    return await delete_product_logic(product_id)

# ---------------------------
# Utility: reset (for tests/demo)
# ---------------------------
@app.post("/reset")
async def reset_all():
    return await reset_all_logic()


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8085))
    logger.info(f"Starting inventory backend on port {port}")
    uvicorn.run(app, host="0.0.0.0", port=port)
