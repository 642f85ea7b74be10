"""Authentication use cases."""

from .get_actor import GetActorRequest, GetActorUseCase

__all__ = [
    "GetActorRequest",
    "GetActorUseCase",
]
