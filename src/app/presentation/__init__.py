"""Camada de apresentação: bindings de estado e view models por tela."""

from app.presentation.binding import StateBinding
from app.presentation.sorting import (
    NO_LEADING_NUMBER,
    extract_leading_number,
    sort_by_leading_number,
)
from app.presentation.view_state import (
    LOADING,
    SUCCESS,
    Error,
    Loading,
    SplashState,
    Success,
    ViewState,
)

__all__ = [
    "LOADING",
    "NO_LEADING_NUMBER",
    "SUCCESS",
    "Error",
    "Loading",
    "SplashState",
    "StateBinding",
    "Success",
    "ViewState",
    "extract_leading_number",
    "sort_by_leading_number",
]
