"""Base controller with async worker-friendly patterns for kuberviz.

This module provides the foundation for background data loading using Textual
workers, ensuring the UI remains responsive while list files are read and
parsed.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class WorkerResult:
    """Result wrapper for worker operations."""

    success: bool
    data: Any | None = None
    error: str | None = None
    duration_ms: float = 0.0


class BaseController(ABC):
    """Base controller class with worker-friendly patterns.

    Subclasses should implement the abstract methods to provide
    specific data loading functionality.
    """

    @abstractmethod
    async def check_sources(self) -> bool:
        """Check if the data sources are available.

        Returns:
            True if every configured source can be read, False otherwise
        """
        ...

    @abstractmethod
    async def fetch_all(self) -> WorkerResult:
        """Fetch all data from the sources.

        Returns:
            WorkerResult wrapping the fetched data
        """
        ...
