from .critical_files import (
    InvalidDocumentError,
    critical_files,
    critical_files_for_many,
)

__all__ = [
    "InvalidDocumentError",
    "critical_files",
    "critical_files_for_many",
]
