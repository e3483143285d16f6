"""
Module principal de l'application FastAPI de l'atelier d'usinage.

Ce module configure l'instance FastAPI et inclut les routeurs des devis (orçamentos),
des commandes (pedidos), des clients et de l'historique.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from usinagem.config import settings
from usinagem.customers.router import router as customer_router
from usinagem.database import create_tables
from usinagem.history.router import router as history_router
from usinagem.orders.router import router as order_router
from usinagem.quotes.router import router as quote_router

# Configurer le logging
logging.basicConfig(level=logging.DEBUG if settings.is_development else logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Démarrage de l'API: création des tables si nécessaire.")
    await create_tables()
    yield


app = FastAPI(
    title="Usinagem API",
    description="API de gestion des devis, des commandes et de l'historique d'un atelier d'usinage.",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(quote_router)
app.include_router(order_router)
app.include_router(customer_router)
app.include_router(history_router)


@app.get("/")
async def root():
    return {"message": "Usinagem API"}
