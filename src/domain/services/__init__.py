"""Domain services."""
from src.domain.services.naming import (
    build_stored_name,
    current_millis,
    newest_first_key,
    reduce_to_basename,
    split_stored_name,
    uploaded_at,
    validate_original_filename,
)

__all__ = [
    "build_stored_name",
    "current_millis",
    "newest_first_key",
    "reduce_to_basename",
    "split_stored_name",
    "uploaded_at",
    "validate_original_filename",
]
