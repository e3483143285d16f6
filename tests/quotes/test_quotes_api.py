"""
Tests d'intégration pour la création, la lecture et la mise à jour des devis.
"""
import json
from decimal import Decimal

import pytest
from fastapi import status
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from usinagem.history.models import HistoryEntry
from usinagem.quotes.models import Quote

pytestmark = pytest.mark.asyncio

QUOTE_PAYLOAD = {
    "itemId": "item-77",
    "cliente": "Usinagem Pereira",
    "quantidade": 4,
    "material": "Inox 304",
    "dataEmissao": "2024-05-10T08:30:00Z",
    "operacao": "Torneamento CNC",
    "valor": "820.50",
}


async def test_create_quote_success(test_client: AsyncClient, db_session: AsyncSession, auth_headers):
    response = await test_client.post("/orcamentos", json=QUOTE_PAYLOAD, headers=auth_headers)

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["status"] == "PENDENTE"
    assert data["itemId"] == "item-77"
    assert Decimal(data["valor"]) == Decimal("820.50")
    assert "id" in data

    result = await db_session.execute(select(HistoryEntry))
    entry = result.scalars().one()
    assert entry.acao == "CRIAR_ORCAMENTO"
    assert entry.entidade_id == data["id"]
    assert entry.usuario_nome == "Operador Teste"


async def test_create_quote_invalid_status(test_client: AsyncClient):
    payload = dict(QUOTE_PAYLOAD, status="QUALQUER")
    response = await test_client.post("/orcamentos", json=payload)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "Status inválido" in response.json()["detail"]


async def test_create_quote_missing_field(test_client: AsyncClient):
    payload = {k: v for k, v in QUOTE_PAYLOAD.items() if k != "material"}
    response = await test_client.post("/orcamentos", json=payload)

    assert response.status_code == 422


async def test_get_quote(test_client: AsyncClient, test_quote: Quote):
    response = await test_client.get(f"/orcamentos/{test_quote.id}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["cliente"] == "Metalúrgica Silva"
    assert Decimal(response.json()["valor"]) == Decimal("1500.00")


async def test_get_quote_not_found(test_client: AsyncClient):
    response = await test_client.get("/orcamentos/inexistant")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Orçamento não encontrado"


async def test_update_quote_partial(test_client: AsyncClient, db_session: AsyncSession, test_quote: Quote):
    quote_id = test_quote.id
    response = await test_client.put(f"/orcamentos/{quote_id}", json={"quantidade": 12, "status": "APROVADO"})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["quantidade"] == 12
    assert data["status"] == "APROVADO"
    assert data["material"] == "Aço 1045"

    result = await db_session.execute(select(HistoryEntry))
    entry = result.scalars().one()
    assert entry.acao == "ATUALIZAR_ORCAMENTO"
    snapshots = json.loads(entry.dados)
    assert snapshots["antigos"]["quantidade"] == 10
    assert snapshots["novos"]["quantidade"] == 12


async def test_update_quote_not_found(test_client: AsyncClient):
    response = await test_client.put("/orcamentos/inexistant", json={"quantidade": 2})

    assert response.status_code == status.HTTP_404_NOT_FOUND


async def test_update_quote_rejects_empty_strings(
    test_client: AsyncClient, db_session: AsyncSession, test_quote: Quote
):
    """itemId, material et operacao ne peuvent pas être vidés par un PUT."""
    quote_id = test_quote.id
    for payload in ({"itemId": ""}, {"material": ""}, {"operacao": ""}):
        response = await test_client.put(f"/orcamentos/{quote_id}", json=payload)
        assert response.status_code == 422

    db_session.expire_all()
    quote = await db_session.get(Quote, quote_id)
    assert quote.item_id == "item-1"
    assert quote.material == "Aço 1045"


async def test_update_missing_quote_with_invalid_status(test_client: AsyncClient):
    """Un devis inexistant donne 404 même si le statut fourni est invalide."""
    response = await test_client.put("/orcamentos/inexistant", json={"status": "XX"})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Orçamento não encontrado"


async def test_update_quote_valor_keeps_cents(test_client: AsyncClient, test_quote: Quote):
    response = await test_client.put(f"/orcamentos/{test_quote.id}", json={"valor": "0.10"})

    assert response.status_code == status.HTTP_200_OK
    assert Decimal(response.json()["valor"]) == Decimal("0.10")
