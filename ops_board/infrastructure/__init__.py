"""Infrastructure layer package."""

from .excel_repository import save_output_workbook, write_output_excel
from .report_exporter import save_summary_json
from .upload_repository import read_upload_text

__all__ = ["read_upload_text", "save_output_workbook", "write_output_excel", "save_summary_json"]
