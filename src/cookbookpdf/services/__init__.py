from .export_service import ExportRequest, ExportResult, export_cookbook, render_markup

__all__ = ["ExportRequest", "ExportResult", "export_cookbook", "render_markup"]
