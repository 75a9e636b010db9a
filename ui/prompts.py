"""User interaction prompts"""

from abc import ABC, abstractmethod
from typing import List, Optional

from core.enums import Month
from core.models import MonthOption


class UserPrompt(ABC):
    """Abstract selection prompt interface"""

    @abstractmethod
    async def select_year(self, years: List[str], current: Optional[str]) -> str:
        """Select year sheet"""
        pass

    @abstractmethod
    async def select_month(self, options: List[MonthOption], current: Month) -> Month:
        """Select month"""
        pass


class ConsolePrompt(UserPrompt):
    """Console-based user prompts"""

    async def select_year(self, years: List[str], current: Optional[str]) -> str:
        """Select year sheet"""
        print("\nAvailable years:")
        for i, year in enumerate(years, 1):
            marker = " *" if year == current else ""
            print(f"  {i}. {year}{marker}")

        while True:
            raw = input(f"Select year (1-{len(years)}, Enter keeps current): ").strip()
            if not raw and current:
                return current
            try:
                choice = int(raw)
                if 1 <= choice <= len(years):
                    return years[choice - 1]
                else:
                    print("Invalid choice")
            except ValueError:
                print("Please enter a number")

    async def select_month(self, options: List[MonthOption], current: Month) -> Month:
        """Select month"""
        print("\nMonths:")
        for i, option in enumerate(options, 1):
            marker = " *" if option.value == current else ""
            print(f"  {i}. {option.label}{marker}")

        while True:
            raw = input("Select month (1-12, Enter keeps current): ").strip()
            if not raw:
                return current
            try:
                choice = int(raw)
                if 1 <= choice <= len(options):
                    return options[choice - 1].value
                else:
                    print("Invalid choice")
            except ValueError:
                print("Please enter a number")
