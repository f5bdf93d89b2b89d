"""Testes do StateBinding e da ordenação de transformações."""

from __future__ import annotations

import asyncio
import threading

import pytest

from app.domain import Transformation
from app.presentation import (
    LOADING,
    NO_LEADING_NUMBER,
    SUCCESS,
    StateBinding,
    extract_leading_number,
    sort_by_leading_number,
)
from app.presentation.view_models import HeroesListViewModel
from tests.fakes.fake_api_session import GOKU, KAIOKEN, OOZARU, FakeGetAllHeroesUseCase


async def drain() -> None:
    """Deixa o loop entregar as atualizações agendadas."""
    for _ in range(3):
        await asyncio.sleep(0)


class TestStateBinding:
    """Testes de entrega de estado."""

    @pytest.mark.asyncio
    async def test_delivers_in_order(self) -> None:
        """Entregas preservam a ordem das chamadas, sem agrupar."""
        received: list[int] = []
        binding: StateBinding[int] = StateBinding()
        binding.bind(received.append)

        for value in (1, 2, 2, 3):
            binding.update(value)
        await drain()

        assert received == [1, 2, 2, 3]

    @pytest.mark.asyncio
    async def test_update_does_not_deliver_synchronously(self) -> None:
        """update() retorna antes da entrega."""
        received: list[str] = []
        binding: StateBinding[str] = StateBinding()
        binding.bind(received.append)

        binding.update("loading")

        assert received == []
        await drain()
        assert received == ["loading"]

    @pytest.mark.asyncio
    async def test_without_observer_updates_are_dropped(self) -> None:
        """Sem observador, nada é entregue nem levantado."""
        binding: StateBinding[str] = StateBinding()
        binding.update("lost")
        await drain()
        assert binding.is_bound is False

    @pytest.mark.asyncio
    async def test_rebind_replaces_observer(self) -> None:
        """Novo bind substitui o anterior."""
        first: list[str] = []
        second: list[str] = []
        binding: StateBinding[str] = StateBinding()
        binding.bind(first.append)
        binding.bind(second.append)

        binding.update("ready")
        await drain()

        assert first == []
        assert second == ["ready"]

    @pytest.mark.asyncio
    async def test_observer_error_does_not_break_delivery(self) -> None:
        """Exceção do observador é registrada e entregas seguintes continuam."""
        received: list[int] = []

        def observer(value: int) -> None:
            if value == 1:
                raise RuntimeError("boom")
            received.append(value)

        binding: StateBinding[int] = StateBinding()
        binding.bind(observer)
        binding.update(1)
        binding.update(2)
        await drain()

        assert received == [2]

    @pytest.mark.asyncio
    async def test_update_from_worker_thread(self) -> None:
        """Atualização vinda de outra thread chega no loop da UI."""
        loop = asyncio.get_running_loop()
        delivered = asyncio.Event()
        received: list[tuple[str, int]] = []

        def observer(value: str) -> None:
            received.append((value, threading.get_ident()))
            delivered.set()

        binding: StateBinding[str] = StateBinding(loop)
        binding.bind(observer)
        worker = threading.Thread(target=binding.update, args=("from-worker",))
        worker.start()
        worker.join()

        await asyncio.wait_for(delivered.wait(), timeout=1)

        assert received == [("from-worker", threading.get_ident())]

    def test_binding_survives_closed_loop(self) -> None:
        """Binding criado em um loop encerrado entrega no loop seguinte."""
        received: list[str] = []

        async def create() -> StateBinding[str]:
            binding: StateBinding[str] = StateBinding()
            binding.bind(received.append)
            return binding

        async def update(binding: StateBinding[str]) -> None:
            binding.update("second-loop")
            await drain()

        binding = asyncio.run(create())
        asyncio.run(update(binding))

        assert received == ["second-loop"]

    def test_view_model_reload_on_new_loop(self) -> None:
        """load() repetido em outro loop reinicia em Loading."""
        states: list = []
        view_model = HeroesListViewModel(FakeGetAllHeroesUseCase([GOKU]))
        view_model.on_state_changed.bind(states.append)

        async def load() -> None:
            await view_model.load()
            await drain()

        asyncio.run(load())
        asyncio.run(load())

        assert states == [LOADING, SUCCESS, LOADING, SUCCESS]

    def test_update_without_loop_raises(self) -> None:
        """Fora de um loop e sem loop configurado, update falha."""
        binding: StateBinding[str] = StateBinding()
        with pytest.raises(RuntimeError):
            binding.update("x")


def _named(name: str) -> Transformation:
    return Transformation(id=name, name=name, description="", photo="")


class TestLeadingNumberSorting:
    """Testes da ordenação pelo número do nome."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("1. Oozaru – Gran Mono", 1),
            ("10. Super Saiyan Blue", 10),
            ("  3. Super Saiyan 3", 3),
            ("-2. Negativo", -2),
            ("No Number", NO_LEADING_NUMBER),
            ("", NO_LEADING_NUMBER),
            ("1.2. Versão", 12),
            ("SSJ 4", NO_LEADING_NUMBER),
            ("99999999999999999999. Big", NO_LEADING_NUMBER),
        ],
    )
    def test_extract_leading_number(self, name: str, expected: int) -> None:
        """Número do primeiro token, sem pontos."""
        assert extract_leading_number(name) == expected

    def test_sort_places_unnumbered_last(self) -> None:
        """Ordena por número e deixa nomes sem número no fim."""
        items = [_named("2. Kaioken"), _named("1. Oozaru"), _named("No Number")]

        ordered = [item.name for item in sort_by_leading_number(items)]

        assert ordered == ["1. Oozaru", "2. Kaioken", "No Number"]

    def test_oversized_number_sorts_with_unnumbered(self) -> None:
        """Número acima do limite não passa à frente de nomes sem número."""
        items = [_named("No Number"), _named("99999999999999999999. Big"), _named("1. Oozaru")]

        ordered = [item.name for item in sort_by_leading_number(items)]

        assert ordered == ["1. Oozaru", "No Number", "99999999999999999999. Big"]

    def test_sort_is_numeric_not_lexicographic(self) -> None:
        """10 vem depois de 2."""
        items = [_named("10. Blue"), _named("2. Kaioken")]
        assert [i.name for i in sort_by_leading_number(items)] == ["2. Kaioken", "10. Blue"]

    def test_sort_is_stable(self) -> None:
        """Empates mantêm a ordem original."""
        first, second = _named("Alpha"), _named("Beta")
        assert sort_by_leading_number([first, second]) == [first, second]

    def test_sort_fixtures(self) -> None:
        """Transformações reais ordenadas."""
        assert sort_by_leading_number([KAIOKEN, OOZARU]) == [OOZARU, KAIOKEN]
