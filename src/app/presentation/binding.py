"""StateBinding - notificação de estado com um único observador.

`update()` agenda a entrega no event loop da UI (o informado ou o em execução) via
`call_soon_threadsafe`: nunca bloqueia o chamador, pode retornar antes da
entrega, preserva a ordem das chamadas e não agrupa atualizações.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

StateT = TypeVar("StateT")

Observer = Callable[[StateT], None]


class StateBinding(Generic[StateT]):
    """Entrega assíncrona de transições de estado a no máximo um observador.

    Não há unbind: o descarte do binding encerra as entregas.
    """

    __slots__ = ("_last_loop", "_loop", "_observer")

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """Inicializa o binding.

        Args:
            loop: Event loop dono da UI, fixo. Se None, cada update entrega no
                loop em execução; chamadas fora de um loop (ex: threads de
                trabalho) usam o último loop visto, se ainda aberto.
        """
        self._loop = loop
        self._last_loop: asyncio.AbstractEventLoop | None = None
        if loop is None:
            try:
                self._last_loop = asyncio.get_running_loop()
            except RuntimeError:
                self._last_loop = None
        self._observer: Observer[StateT] | None = None

    @property
    def is_bound(self) -> bool:
        return self._observer is not None

    def bind(self, observer: Observer[StateT]) -> None:
        """Registra o observador, substituindo o anterior."""
        self._observer = observer

    def update(self, new_state: StateT) -> None:
        """Agenda a entrega de `new_state` ao observador atual.

        Raises:
            RuntimeError: Sem loop utilizável (fora de um loop e sem loop aberto conhecido)
        """
        self._target_loop().call_soon_threadsafe(self._deliver, new_state)

    def _target_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        try:
            self._last_loop = asyncio.get_running_loop()
        except RuntimeError:
            if self._last_loop is None or self._last_loop.is_closed():
                raise
        return self._last_loop

    def _deliver(self, new_state: StateT) -> None:
        # Observador lido no momento da entrega
        observer = self._observer
        if observer is None:
            return
        try:
            observer(new_state)
        except Exception:
            logger.exception(
                "state_observer_failed",
                extra={"state": type(new_state).__name__},
            )
