"""Stage 1: Retrieval - fetch the raw rows of a year sheet"""

from core.interfaces import Stage, SheetSource
from core.models import SheetRows
from core.exceptions import StageError, SheetFetchError


class SheetLoader(Stage[str, SheetRows]):
    """Stage 1: Fetch one year sheet from the configured source"""

    @property
    def name(self) -> str:
        return "Sheet Retrieval"

    @property
    def stage_number(self) -> int:
        return 1

    def __init__(self, source: SheetSource):
        self.source = source

    def validate_input(self, input_data: str) -> bool:
        """Validate year token"""
        return isinstance(input_data, str) and input_data.strip().isdigit()

    async def execute(self, input_data: str) -> SheetRows:
        """Execute retrieval stage"""
        try:
            return await self.source.fetch_rows(input_data)
        except SheetFetchError as e:
            raise StageError(self.stage_number, str(e)) from e
        except Exception as e:
            raise StageError(
                self.stage_number,
                f"Unexpected error fetching sheet {input_data}: {e}"
            ) from e
