import logging
from typing import Any, Dict, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from usinagem.orders.models import Order
from usinagem.quotes.exceptions import (
    QuoteConversionException,
    QuoteCreationFailedException,
    QuoteUpdateException,
)
from usinagem.quotes.interfaces.repositories import AbstractQuoteRepository
from usinagem.quotes.models import Quote

logger = logging.getLogger(__name__)


class SQLAlchemyQuoteRepository(AbstractQuoteRepository):
    """Implémentation SQLAlchemy du repository des devis."""

    def __init__(self, db_session: AsyncSession):
        self.db = db_session

    async def get_by_id(self, quote_id: str) -> Optional[Quote]:
        logger.debug(f"[QuoteRepository] Récupération devis ID: {quote_id}")
        return await self.db.get(Quote, quote_id)

    async def create(self, *, quote_data: Dict[str, Any]) -> Quote:
        try:
            db_quote = Quote(**quote_data)
            self.db.add(db_quote)
            await self.db.commit()
            await self.db.refresh(db_quote)
            return db_quote
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"[QuoteRepository] Erreur création devis: {e}", exc_info=True)
            raise QuoteCreationFailedException(detail=f"Database error during quote creation: {e}")

    async def update(self, *, quote: Quote, changes: Dict[str, Any]) -> Quote:
        quote_id = quote.id
        try:
            for field, value in changes.items():
                setattr(quote, field, value)
            self.db.add(quote)
            await self.db.commit()
            await self.db.refresh(quote)
            return quote
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"[QuoteRepository] Erreur MAJ devis {quote_id}: {e}", exc_info=True)
            raise QuoteUpdateException(quote_id=quote_id, detail=str(e))

    async def convert_to_order(
        self, *, quote: Quote, order_data: Dict[str, Any], quote_status: str
    ) -> Tuple[Quote, Order]:
        """
        Crée la commande et passe le devis au statut converti de manière atomique.

        Un seul commit couvre les deux écritures: en cas d'échec, le rollback
        annule aussi la commande, aucune commande orpheline ne subsiste.
        """
        quote_id = quote.id
        try:
            db_order = Order(**order_data)
            self.db.add(db_order)
            quote.status = quote_status
            self.db.add(quote)
            await self.db.flush()
            await self.db.commit()
            await self.db.refresh(db_order)
            await self.db.refresh(quote)
            logger.info(f"[QuoteRepository] Devis {quote_id} converti en commande {db_order.id}.")
            return quote, db_order
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"[QuoteRepository] Erreur conversion devis {quote_id}, rollback: {e}", exc_info=True)
            raise QuoteConversionException(quote_id=quote_id, detail=str(e))
