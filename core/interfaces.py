"""Abstract base classes for dashboard components"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class Stage(ABC, Generic[InputT, OutputT]):
    """Abstract base class for all pipeline stages"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable stage name"""
        pass

    @property
    @abstractmethod
    def stage_number(self) -> int:
        """Stage number (0-4)"""
        pass

    @abstractmethod
    async def execute(self, input_data: InputT) -> OutputT:
        """Execute the stage"""
        pass

    @abstractmethod
    def validate_input(self, input_data: InputT) -> bool:
        """Validate input before processing"""
        pass


class SheetSource(ABC):
    """Abstract base class for year-sheet sources"""

    @abstractmethod
    async def sheet_exists(self, year: str) -> bool:
        """Whether a sheet for this year exists. Never raises."""
        pass

    @abstractmethod
    async def fetch_rows(self, year: str) -> "SheetRows":
        """Fetch the raw rows of a year sheet"""
        pass

    async def aclose(self) -> None:
        """Release any held resources"""
        return None
