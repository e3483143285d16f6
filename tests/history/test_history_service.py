"""
Tests unitaires du HistoryService.
"""
from unittest.mock import AsyncMock

import pytest

from usinagem.auth.models import Actor
from usinagem.config import settings
from usinagem.history.constants import HistoryAction, HistoryEntity, compose_action
from usinagem.history.exceptions import HistoryRecordingException, InvalidHistoryEntityException
from usinagem.history.service import HistoryService, serialize_snapshots



def test_compose_action():
    assert compose_action(HistoryAction.CRIAR, HistoryEntity.PEDIDO) == "CRIAR_PEDIDO"
    assert compose_action(HistoryAction.CONVERTER_ORCAMENTO, HistoryEntity.ORCAMENTO) == "CONVERTER_ORCAMENTO_ORCAMENTO"


def test_serialize_snapshots_keeps_accents():
    dados = serialize_snapshots({"status": "PENDENTE"}, {"cliente": "João"})
    assert dados == '{"antigos": {"status": "PENDENTE"}, "novos": {"cliente": "João"}}'


@pytest.mark.asyncio
async def test_record_builds_entry():
    repo = AsyncMock()
    service = HistoryService(history_repo=repo)

    await service.record(
        HistoryAction.STATUS_ALTERADO,
        HistoryEntity.PEDIDO,
        "p-1",
        Actor(id="3", name="Bia"),
        {"status": "PENDENTE"},
        {"status": "CANCELADO"},
    )

    entry = repo.add.await_args.args[0]
    assert entry.acao == "STATUS_ALTERADO_PEDIDO"
    assert entry.entidade == "PEDIDO"
    assert entry.entidade_id == "p-1"
    assert entry.usuario_id == "3"
    assert entry.usuario_nome == "Bia"


@pytest.mark.asyncio
async def test_record_never_raises():
    repo = AsyncMock()
    repo.add.side_effect = HistoryRecordingException(detail="db down")
    service = HistoryService(history_repo=repo)

    await service.record(HistoryAction.CRIAR, HistoryEntity.ORCAMENTO, "q-1")

    repo.add.assert_awaited_once()


@pytest.mark.asyncio
async def test_list_history_pagination_math():
    repo = AsyncMock()
    repo.list_paginated.return_value = ([], 41)
    service = HistoryService(history_repo=repo)

    result = await service.list_history(entity="pedido", action="criar", page=3, page_size=20)

    repo.list_paginated.assert_awaited_once_with(
        filters={"entidade": "PEDIDO", "acao__contains": "CRIAR"}, offset=40, limit=20
    )
    assert result.paginacao.total == 41
    assert result.paginacao.total_paginas == 3
    assert result.paginacao.pagina == 3


@pytest.mark.asyncio
async def test_list_history_empty_has_zero_pages():
    repo = AsyncMock()
    repo.list_paginated.return_value = ([], 0)
    service = HistoryService(history_repo=repo)

    result = await service.list_history()

    assert result.paginacao.total_paginas == 0
    assert result.dados == []


@pytest.mark.asyncio
async def test_list_history_unknown_entity():
    service = HistoryService(history_repo=AsyncMock())

    with pytest.raises(InvalidHistoryEntityException):
        await service.list_history(entity="FORNECEDOR")


@pytest.mark.asyncio
async def test_list_history_default_page_size_from_settings():
    repo = AsyncMock()
    repo.list_paginated.return_value = ([], 0)
    service = HistoryService(history_repo=repo)

    result = await service.list_history()

    assert repo.list_paginated.await_args.kwargs["limit"] == settings.DEFAULT_PAGE_SIZE
    assert result.paginacao.por_pagina == settings.DEFAULT_PAGE_SIZE
