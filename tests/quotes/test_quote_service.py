"""
Tests unitaires du QuoteService avec des repositories mockés.
"""
from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from usinagem.auth.models import Actor
from usinagem.history.constants import HistoryAction, HistoryEntity
from usinagem.orders.exceptions import ActiveOrderExistsException
from usinagem.quotes.config import ConversionPolicy
from usinagem.quotes.exceptions import InvalidQuoteStatusException, QuoteNotFoundException
from usinagem.quotes.models import QuoteUpdate
from usinagem.quotes.service import QuoteService

pytestmark = pytest.mark.asyncio

NOW = datetime(2024, 3, 1, tzinfo=timezone.utc)


def make_quote(**overrides):
    data = dict(
        id="q-1",
        quantidade=5,
        material="Latão",
        data_emissao=NOW,
        operacao="Retífica",
        cliente=None,
        item_id="item-9",
        valor=Decimal("99.90"),
        status="PENDENTE",
        created_at=NOW,
    )
    data.update(overrides)
    return SimpleNamespace(**data)


def make_order(**overrides):
    data = dict(
        id="p-1",
        quantidade=5,
        material="Latão",
        data_emissao=NOW,
        operacao="Retífica",
        cliente="Sem cliente",
        item_id="item-9",
        status="PENDENTE",
        created_at=NOW,
    )
    data.update(overrides)
    return SimpleNamespace(**data)


@pytest.fixture
def policy() -> ConversionPolicy:
    return ConversionPolicy(
        terminal_order_statuses=["CANCELADO", "FINALIZADO"],
        converted_order_status="PENDENTE",
        converted_quote_status="CONVERTIDO",
        default_client_name="Sem cliente",
    )


@pytest.fixture
def repos():
    quote_repo = AsyncMock()
    order_repo = AsyncMock()
    history_service = AsyncMock()
    return quote_repo, order_repo, history_service


async def test_convert_uses_configured_policy(repos, policy):
    quote_repo, order_repo, history_service = repos
    quote = make_quote()
    quote_repo.get_by_id.return_value = quote
    order_repo.find_active_for_item.return_value = None
    quote_repo.convert_to_order.return_value = (make_quote(status="CONVERTIDO"), make_order())

    service = QuoteService(quote_repo, order_repo, history_service, policy)
    actor = Actor(id="7", name="Ana")
    order = await service.convert_to_order("q-1", actor)

    assert order.id == "p-1"
    order_repo.find_active_for_item.assert_awaited_once_with(
        item_id="item-9", terminal_statuses=["CANCELADO", "FINALIZADO"]
    )
    kwargs = quote_repo.convert_to_order.await_args.kwargs
    assert kwargs["quote_status"] == "CONVERTIDO"
    assert kwargs["order_data"]["status"] == "PENDENTE"
    assert kwargs["order_data"]["cliente"] == "Sem cliente"

    calls = history_service.record.await_args_list
    assert len(calls) == 2
    assert calls[0].args[:4] == (HistoryAction.CONVERTER_ORCAMENTO, HistoryEntity.ORCAMENTO, "q-1", actor)
    assert calls[0].args[4].status == "PENDENTE"
    assert calls[0].args[5].status == "CONVERTIDO"
    assert calls[1].args[:3] == (HistoryAction.CRIAR, HistoryEntity.PEDIDO, "p-1")
    assert calls[1].args[4] is None


async def test_convert_not_found_has_no_side_effects(repos, policy):
    quote_repo, order_repo, history_service = repos
    quote_repo.get_by_id.return_value = None

    service = QuoteService(quote_repo, order_repo, history_service, policy)
    with pytest.raises(QuoteNotFoundException):
        await service.convert_to_order("absent")

    order_repo.find_active_for_item.assert_not_awaited()
    quote_repo.convert_to_order.assert_not_awaited()
    history_service.record.assert_not_awaited()


async def test_convert_conflict_reports_existing_order(repos, policy):
    quote_repo, order_repo, history_service = repos
    quote_repo.get_by_id.return_value = make_quote()
    order_repo.find_active_for_item.return_value = make_order(id="p-old", status="EM_ANDAMENTO")

    service = QuoteService(quote_repo, order_repo, history_service, policy)
    with pytest.raises(ActiveOrderExistsException) as exc_info:
        await service.convert_to_order("q-1")

    assert exc_info.value.order_id == "p-old"
    assert exc_info.value.status == "EM_ANDAMENTO"
    quote_repo.convert_to_order.assert_not_awaited()
    history_service.record.assert_not_awaited()


async def test_update_ignores_null_fields_except_client(repos, policy):
    quote_repo, order_repo, history_service = repos
    quote = make_quote(cliente="Antigo")
    quote_repo.get_by_id.return_value = quote
    quote_repo.update.return_value = make_quote(cliente=None, quantidade=8)

    service = QuoteService(quote_repo, order_repo, history_service, policy)
    update = QuoteUpdate.model_validate({"cliente": None, "quantidade": 8, "material": None})
    await service.update_quote("q-1", update)

    assert quote_repo.update.await_args.kwargs["changes"] == {"cliente": None, "quantidade": 8}


async def test_update_rejects_unknown_status(repos, policy):
    quote_repo, order_repo, history_service = repos
    service = QuoteService(quote_repo, order_repo, history_service, policy)

    with pytest.raises(InvalidQuoteStatusException):
        await service.update_quote("q-1", QuoteUpdate(status="INVENTADO"))
    quote_repo.update.assert_not_awaited()
