"""User interface components"""

from .progress import ProgressTracker, ConsoleProgress, SilentProgress
from .prompts import UserPrompt, ConsolePrompt
from .display import DashboardDisplay, ConsoleDisplay

__all__ = [
    "ProgressTracker",
    "ConsoleProgress",
    "SilentProgress",
    "UserPrompt",
    "ConsolePrompt",
    "DashboardDisplay",
    "ConsoleDisplay",
]
