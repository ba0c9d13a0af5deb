"""Infrastructure utilities."""

from .file_utils import (
    ensure_parent_directory_exists,
    read_json_file,
    read_structured_file,
    read_text_file,
    read_yaml_file,
    write_text_file,
)

__all__ = [
    "ensure_parent_directory_exists",
    "read_json_file",
    "read_structured_file",
    "read_text_file",
    "read_yaml_file",
    "write_text_file",
]
