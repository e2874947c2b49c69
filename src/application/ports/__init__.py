"""Application ports package."""

from .database import DatabaseEnginePort
from .transfers_repository import TransfersRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "TransfersRepositoryPort",
]
