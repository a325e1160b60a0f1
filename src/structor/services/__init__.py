from .export_service import ExportService
from .rename_engine import RenameEngine
from .run_controller import RunController

__all__ = ["ExportService", "RenameEngine", "RunController"]
