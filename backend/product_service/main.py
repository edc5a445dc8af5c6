import logging
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from product_service.config import Config
from product_service.db.database import Database
from product_service.routers import products, health
from product_service.services.product_store import ProductStore
from product_service.exceptions import (
    AppException,
    app_exception_handler,
    validation_exception_handler,
    generic_exception_handler,
)

# Configure logging
logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    database = Database()
    await database.connect()
    if Config.AUTO_CREATE_TABLES:
        await database.create_tables()
    app.state.store = ProductStore(database)
    yield
    await database.disconnect()


app = FastAPI(
    title="Product Service API",
    version="1.0.0",
    description="CRUD over products with guarded updates on the changed counter",
    lifespan=lifespan
)

# Register exception handlers
app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(products.router)
