import logging
from typing import Optional

from usinagem.auth.models import Actor
from usinagem.history.constants import HistoryAction, HistoryEntity
from usinagem.history.service import HistoryService
from usinagem.orders.exceptions import ActiveOrderExistsException
from usinagem.orders.interfaces.repositories import AbstractOrderRepository
from usinagem.orders.models import OrderRead
from usinagem.quotes.config import ALLOWED_QUOTE_STATUS, DEFAULT_QUOTE_STATUS, ConversionPolicy
from usinagem.quotes.exceptions import InvalidQuoteStatusException, QuoteNotFoundException
from usinagem.quotes.interfaces.repositories import AbstractQuoteRepository
from usinagem.quotes.models import QuoteCreate, QuoteRead, QuoteUpdate

logger = logging.getLogger(__name__)

# Colonnes non nullables: une valeur null reçue dans un PUT est ignorée
NULLABLE_FIELDS = {"cliente"}


class QuoteService:
    """Service applicatif pour la gestion des devis et leur conversion en commandes."""

    def __init__(
        self,
        quote_repository: AbstractQuoteRepository,
        order_repository: AbstractOrderRepository,
        history_service: HistoryService,
        policy: Optional[ConversionPolicy] = None,
    ):
        self.quote_repository = quote_repository
        self.order_repository = order_repository
        self.history_service = history_service
        self.policy = policy or ConversionPolicy.from_settings()

    def _check_status(self, status: str) -> None:
        if status not in ALLOWED_QUOTE_STATUS:
            logger.warning(f"[QuoteService] Statut de devis invalide: {status}")
            raise InvalidQuoteStatusException(status=status, allowed=ALLOWED_QUOTE_STATUS)

    async def get_quote(self, quote_id: str) -> QuoteRead:
        """Récupère un devis par ID."""
        quote_db = await self.quote_repository.get_by_id(quote_id)
        if not quote_db:
            logger.warning(f"[QuoteService] Devis ID {quote_id} non trouvé.")
            raise QuoteNotFoundException(quote_id)
        return QuoteRead.model_validate(quote_db)

    async def create_quote(self, quote_data: QuoteCreate, actor: Optional[Actor] = None) -> QuoteRead:
        """Crée un devis (statut PENDENTE par défaut) et l'enregistre dans l'historique."""
        status = quote_data.status or DEFAULT_QUOTE_STATUS
        self._check_status(status)

        logger.info(f"[QuoteService] Création devis pour item {quote_data.item_id}, client '{quote_data.cliente}'")
        data = quote_data.model_dump()
        data["status"] = status
        created = QuoteRead.model_validate(await self.quote_repository.create(quote_data=data))

        await self.history_service.record(
            HistoryAction.CRIAR, HistoryEntity.ORCAMENTO, created.id, actor, None, created
        )
        logger.info(f"[QuoteService] Devis ID {created.id} créé.")
        return created

    async def update_quote(
        self, quote_id: str, update_data: QuoteUpdate, actor: Optional[Actor] = None
    ) -> QuoteRead:
        """Met à jour partiellement un devis; seuls les champs fournis sont modifiés."""
        changes = {
            field: value
            for field, value in update_data.model_dump(exclude_unset=True).items()
            if value is not None or field in NULLABLE_FIELDS
        }
        quote_db = await self.quote_repository.get_by_id(quote_id)
        if not quote_db:
            raise QuoteNotFoundException(quote_id)
        if "status" in changes:
            self._check_status(changes["status"])

        before = QuoteRead.model_validate(quote_db)
        logger.info(f"[QuoteService] MAJ devis ID {quote_id}, champs: {sorted(changes)}")
        updated = QuoteRead.model_validate(
            await self.quote_repository.update(quote=quote_db, changes=changes)
        )

        await self.history_service.record(
            HistoryAction.ATUALIZAR, HistoryEntity.ORCAMENTO, quote_id, actor, before, updated
        )
        return updated

    async def convert_to_order(self, quote_id: str, actor: Optional[Actor] = None) -> OrderRead:
        """
        Transforme un devis en commande.

        1. Le devis doit exister.
        2. Aucune commande non terminée ne doit exister pour le même item.
        3. La commande est créée et le devis marqué converti dans une seule transaction.
        4. Deux entrées d'historique sont enregistrées (devis converti, commande créée).

        La vérification puis la création ne sont pas sérialisées: deux conversions
        concurrentes pour le même item peuvent toutes deux passer la vérification.
        """
        logger.info(f"[QuoteService] Conversion devis ID {quote_id} en commande")
        quote_db = await self.quote_repository.get_by_id(quote_id)
        if not quote_db:
            logger.warning(f"[QuoteService] Conversion impossible, devis ID {quote_id} non trouvé.")
            raise QuoteNotFoundException(quote_id)

        existing = await self.order_repository.find_active_for_item(
            item_id=quote_db.item_id,
            terminal_statuses=self.policy.terminal_order_statuses,
        )
        if existing:
            logger.warning(
                f"[QuoteService] Commande active {existing.id} ({existing.status}) déjà présente pour l'item {quote_db.item_id}."
            )
            raise ActiveOrderExistsException(order_id=existing.id, status=existing.status)

        quote_before = QuoteRead.model_validate(quote_db)
        order_data = {
            "quantidade": quote_db.quantidade,
            "material": quote_db.material,
            "data_emissao": quote_db.data_emissao,
            "operacao": quote_db.operacao,
            "cliente": quote_db.cliente or self.policy.default_client_name,
            "item_id": quote_db.item_id,
            "status": self.policy.converted_order_status,
        }
        quote_after_db, order_db = await self.quote_repository.convert_to_order(
            quote=quote_db,
            order_data=order_data,
            quote_status=self.policy.converted_quote_status,
        )
        quote_after = QuoteRead.model_validate(quote_after_db)
        order = OrderRead.model_validate(order_db)

        await self.history_service.record(
            HistoryAction.CONVERTER_ORCAMENTO, HistoryEntity.ORCAMENTO, quote_id, actor, quote_before, quote_after
        )
        await self.history_service.record(
            HistoryAction.CRIAR, HistoryEntity.PEDIDO, order.id, actor, None, order
        )
        logger.info(f"[QuoteService] Devis ID {quote_id} converti en commande ID {order.id}.")
        return order
