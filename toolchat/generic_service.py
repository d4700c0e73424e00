"""A tool service over any data store."""

from __future__ import annotations

import abc
from typing import Any


class DataService(abc.ABC):
    """A store holding a single piece of text."""

    @abc.abstractmethod
    def get_data(self) -> str: ...

    @abc.abstractmethod
    def set_data(self, data: str) -> None: ...


class MemoryDataService(DataService):
    """Keeps the text in memory."""

    def __init__(self, initial_data: Any) -> None:
        self._data = str(initial_data)

    def get_data(self) -> str:
        return self._data

    def set_data(self, data: str) -> None:
        self._data = data


class GenericService:
    """Exposes a data store through get_data and set_data tools."""

    TOOLS = {
        "get_data": "get memory from service",
        "set_data": "set memory to service",
    }

    def __init__(self, data_service: DataService) -> None:
        self.data_service = data_service

    def get_data(self) -> str:
        return self.data_service.get_data()

    def set_data(self, data: str) -> str:
        """Echo the given memory; the store itself is left unchanged."""
        return f"Current memory: {data}"

    def info(self) -> dict[str, Any]:
        return {
            "instructions": "generic data service",
            "capabilities": {"tools": {}},
            "tools": dict(self.TOOLS),
        }