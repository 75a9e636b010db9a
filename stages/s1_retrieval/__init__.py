"""Stage 1: Sheet retrieval"""

from .loader import SheetLoader

__all__ = ["SheetLoader"]
