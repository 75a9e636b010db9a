"""Custom exceptions for the campos dashboard"""


class CamposError(Exception):
    """Base exception for all dashboard errors"""
    pass


class PipelineError(CamposError):
    """Error in pipeline execution"""
    def __init__(self, message: str, stage: int = None):
        super().__init__(message)
        self.stage = stage


class StageError(CamposError):
    """Error in a specific stage"""
    def __init__(self, stage: int, message: str):
        super().__init__(f"Stage {stage}: {message}")
        self.stage = stage
        self.message = message


class SheetFetchError(CamposError):
    """Year sheet could not be fetched"""
    def __init__(self, message: str, year: str = None):
        super().__init__(message)
        self.year = year


class SheetParseError(SheetFetchError):
    """Sheet response could not be parsed"""
    pass


class CatalogError(CamposError):
    """No year sheets available"""
    pass


class ConfigurationError(CamposError):
    """Required configuration is missing"""
    pass
