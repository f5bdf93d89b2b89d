"""View model da tela de abertura (Loading → Ready após um atraso)."""

from __future__ import annotations

import asyncio

from app.presentation.binding import StateBinding
from app.presentation.view_state import SplashState

DEFAULT_SPLASH_DELAY_SECONDS = 3.0


class SplashViewModel:
    def __init__(
        self,
        delay_seconds: float = DEFAULT_SPLASH_DELAY_SECONDS,
        on_state_changed: StateBinding[SplashState] | None = None,
    ) -> None:
        self._delay_seconds = delay_seconds
        self.on_state_changed: StateBinding[SplashState] = on_state_changed or StateBinding()

    async def load(self) -> None:
        self.on_state_changed.update(SplashState.LOADING)
        await asyncio.sleep(self._delay_seconds)
        self.on_state_changed.update(SplashState.READY)
