"""File utilities for reading manifests, configuration and writing documents."""
import json
import os
from pathlib import Path
from typing import Any

import yaml


def ensure_parent_directory_exists(file_path: str) -> None:
    """
    Ensure the parent directory of a file exists.

    Args:
        file_path: File path
    """
    parent = os.path.dirname(file_path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def read_text_file(file_path: str, encoding: str = "utf-8") -> str:
    """
    Read a text file.

    Raises:
        FileNotFoundError: If file does not exist
    """
    with open(file_path, "r", encoding=encoding) as f:
        return f.read()


def write_text_file(file_path: str, content: str, encoding: str = "utf-8") -> None:
    """
    Write content to a text file, creating parent directories.

    Args:
        file_path: File path
        content: Content to write
        encoding: File encoding
    """
    ensure_parent_directory_exists(file_path)
    with open(file_path, "w", encoding=encoding) as f:
        f.write(content)


def read_yaml_file(file_path: str, encoding: str = "utf-8") -> Any:
    """
    Read a YAML file.

    Raises:
        FileNotFoundError: If file does not exist
        yaml.YAMLError: If file is not valid YAML
    """
    with open(file_path, "r", encoding=encoding) as f:
        return yaml.safe_load(f)


def read_json_file(file_path: str, encoding: str = "utf-8") -> Any:
    """
    Read a JSON file.

    Raises:
        FileNotFoundError: If file does not exist
        json.JSONDecodeError: If file is not valid JSON
    """
    with open(file_path, "r", encoding=encoding) as f:
        return json.load(f)


def read_structured_file(file_path: str) -> Any:
    """Read a YAML or JSON file, chosen by extension (YAML when unknown)."""
    if Path(file_path).suffix.lower() == ".json":
        return read_json_file(file_path)
    return read_yaml_file(file_path)
