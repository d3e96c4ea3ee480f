#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Probescan miscellaneous utilities.

Digest computation, file lookup and configuration loading helpers shared by the
library and the CLI.
"""

import hashlib
import json
import logging
import os
from typing import Optional, Union

import yaml

from probescan.exceptions import ProbeScanError

logger = logging.getLogger(__name__)


def get_digest(text: Union[str, bytes]) -> str:
    """Get SHA-1 digest of given text.

    :param text: Input text to be hashed, either as string or bytes.
    :return: Full SHA-1 digest as lowercase hexadecimal string.
    """
    if isinstance(text, str):
        text = text.encode("utf-8")
    return hashlib.sha1(text).hexdigest()  # nosec: used as identifier, not for security


def find_file(
    file_path: str,
    use_cwd: bool = True,
    search_paths: Optional[list[str]] = None,
    raise_exc: bool = True,
) -> str:
    """Find file in filesystem.

    Absolute paths are checked directly. Relative paths are searched in the search
    paths first and then in the current working directory.

    :param file_path: File name, part of file path or full path to search for.
    :param use_cwd: Try current working directory to find the file, defaults to True.
    :param search_paths: List of paths where to search for the file, defaults to None.
    :param raise_exc: Raise exception if file is not found, defaults to True.
    :return: Full absolute path to the found file, empty string if not found and
        raise_exc is False.
    :raises ProbeScanError: File not found in any of the search locations.
    """
    file_path = file_path.replace("\\", "/")

    if os.path.isabs(file_path):
        if os.path.isfile(file_path):
            return file_path
    else:
        candidates = [
            os.path.join(search_path, file_path)
            for search_path in search_paths or []
            if search_path
        ]
        if use_cwd:
            candidates.append(os.path.join(os.getcwd(), file_path))
        for candidate in candidates:
            if os.path.isfile(candidate):
                return os.path.abspath(candidate).replace("\\", "/")

    if raise_exc:
        raise ProbeScanError(f"File '{file_path}' not found")
    return ""


def load_text(path: str, search_paths: Optional[list[str]] = None) -> str:
    """Load text file content into string.

    :param path: Path to the text file to load.
    :param search_paths: List of directories to search for the file, defaults to None.
    :return: Content of the text file as string.
    """
    path = find_file(path, search_paths=search_paths)
    logger.debug(f"Loading text file from {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_configuration(path: str, search_paths: Optional[list[str]] = None) -> dict:
    """Load configuration from YAML or JSON file.

    :param path: Path to configuration file (relative or absolute).
    :param search_paths: List of paths where to search for the file, defaults to None.
    :raises ProbeScanError: When file cannot be loaded, parsed, or contains invalid format.
    :return: Content of configuration as dictionary.
    """
    try:
        config = load_text(path, search_paths=search_paths)
    except Exception as exc:
        raise ProbeScanError(f"Can't load configuration file: {str(exc)}") from exc

    config_data: Optional[dict] = None
    try:
        config_data = json.loads(config)
    except json.JSONDecodeError:
        try:
            config_data = yaml.safe_load(config)
        except (yaml.YAMLError, UnicodeDecodeError):
            pass

    if not config_data:
        raise ProbeScanError(f"Can't parse configuration file: {path}")
    if not isinstance(config_data, dict):
        raise ProbeScanError(f"Invalid configuration file: {path}")

    return config_data
