"""Progress tracking"""

from abc import ABC, abstractmethod


class ProgressTracker(ABC):
    """Abstract progress tracker"""

    @abstractmethod
    def start_stage(self, stage_num: int, stage_name: str):
        """Start a stage"""
        pass

    @abstractmethod
    def complete_stage(self, stage_num: int):
        """Complete a stage"""
        pass

    @abstractmethod
    def fail(self, stage_num: int, message: str):
        """Mark stage as failed"""
        pass

    @abstractmethod
    def complete(self):
        """Mark pipeline run as complete"""
        pass


class SilentProgress(ProgressTracker):
    """Progress tracker that reports nothing"""

    def start_stage(self, stage_num: int, stage_name: str):
        pass

    def complete_stage(self, stage_num: int):
        pass

    def fail(self, stage_num: int, message: str):
        pass

    def complete(self):
        pass


class ConsoleProgress(ProgressTracker):
    """Console-based progress tracker"""

    def __init__(self, verbose: bool = True):
        self.stages = {
            0: "Year Catalog",
            1: "Sheet Retrieval",
            2: "Aggregation",
            3: "Filtering",
            4: "Stats"
        }
        self.verbose = verbose
        self.completed = set()
        self.current = None

    def start_stage(self, stage_num: int, stage_name: str):
        """Start a stage"""
        self.current = stage_num
        if self.verbose:
            print(f"[◉] Stage {stage_num}: {stage_name}...", flush=True)

    def complete_stage(self, stage_num: int):
        """Complete a stage"""
        self.completed.add(stage_num)
        self.current = None
        if self.verbose:
            print(f"[✓] Stage {stage_num}: {self.stages.get(stage_num, 'Unknown')} complete", flush=True)

    def fail(self, stage_num: int, message: str):
        """Mark stage as failed"""
        print(f"[✗] Stage {stage_num}: {self.stages.get(stage_num, 'Unknown')} failed - {message}", flush=True)

    def complete(self):
        """Mark pipeline run as complete"""
        if self.verbose:
            print("[✓] Dashboard updated", flush=True)
