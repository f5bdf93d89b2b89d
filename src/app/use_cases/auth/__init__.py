"""Use cases de autenticação."""

from app.use_cases.auth.login import LoginUseCase, LoginUseCaseError

__all__ = [
    "LoginUseCase",
    "LoginUseCaseError",
]
