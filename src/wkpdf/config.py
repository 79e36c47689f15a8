#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for wkpdf.

Conversion options can be kept in a configuration file instead of code.
Supported files, searched from the working directory upwards:

- ``.wkpdf.toml``
- ``.wkpdf.yaml`` / ``.wkpdf.yml``
- ``.wkpdf.json``
- ``pyproject.toml`` with a ``[tool.wkpdf]`` table

Example ``.wkpdf.toml``::

    page_size = "Letter"
    use_print_media_type = true
    forms_authentication_cookie_name = ".AUTH"

    [margins]
    left = 10
    right = 10

    [page_footer]
    kind = "args"
    right = "[page]/[topage]"

    [cookies]
    lang = "en"
"""

import json
import sys
from dataclasses import fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from wkpdf.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from wkpdf.exceptions import ConfigurationError, ValidationError
from wkpdf.options.header_footer import PdfHeaderFooter
from wkpdf.options.pdf import PdfConvertOptions, PdfPageMargins


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.wkpdf]`` table from a pyproject.toml file.

    Returns an empty dict when the table does not exist.
    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(
            f"Invalid TOML in pyproject.toml {pyproject_path}: {e}", str(pyproject_path), e
        ) from e
    except OSError as e:
        raise ConfigurationError(f"Error reading pyproject.toml {pyproject_path}: {e}", str(pyproject_path), e) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}",
            str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up the directory tree from ``start_dir`` to the filesystem root,
    checking each directory for the dedicated config files first and then for
    a ``pyproject.toml`` with a ``[tool.wkpdf]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigurationError:
                # Invalid pyproject.toml, keep searching
                pass

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    ConfigurationError
        If the file cannot be read, parsed, or has an unsupported format

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigurationError(f"Configuration file does not exist: {config_path}", str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)

    try:
        with open(config_path, "rb") as f:
            raw = f.read()
        if ext == ".toml":
            config = tomllib.loads(raw.decode("utf-8"))
        elif ext in (".yaml", ".yml"):
            config = yaml.safe_load(raw) or {}
        elif ext == ".json":
            config = json.loads(raw.decode("utf-8"))
        else:
            raise ConfigurationError(
                f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", str(config_path)
            )
    except ConfigurationError:
        raise
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Error reading config file {config_path}: {e}", str(config_path), e) from e

    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Config file must contain a table/object at root level, got {type(config).__name__}", str(config_path)
        )

    return config


def _build_dataclass(cls: type, data: Any, parameter_name: str) -> Any:
    if not isinstance(data, dict):
        raise ValidationError(
            f"'{parameter_name}' must be a table, got {type(data).__name__}",
            parameter_name=parameter_name,
            parameter_value=data,
        )

    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValidationError(
            f"Unknown {parameter_name} option(s): {', '.join(unknown)}",
            parameter_name=parameter_name,
            parameter_value=unknown,
        )

    try:
        return cls(**data)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"Invalid {parameter_name}: {e}", parameter_name=parameter_name, parameter_value=data, original_error=e
        ) from e


def options_from_dict(data: Dict[str, Any]) -> PdfConvertOptions:
    """Build :class:`PdfConvertOptions` from a configuration dictionary.

    Nested ``margins``, ``page_header`` and ``page_footer`` tables are turned
    into their option classes; ``post`` and ``cookies`` keep their order.

    Raises
    ------
    ValidationError
        If the dictionary contains unknown keys or invalid values

    """
    values = dict(data)

    if values.get("margins") is not None:
        values["margins"] = _build_dataclass(PdfPageMargins, values["margins"], "margins")

    for section in ("page_header", "page_footer"):
        if values.get(section) is not None:
            values[section] = _build_dataclass(PdfHeaderFooter, values[section], section)

    for mapping_name in ("post", "cookies"):
        if mapping_name in values:
            mapping = values[mapping_name]
            if not isinstance(mapping, dict):
                raise ValidationError(
                    f"'{mapping_name}' must be a table, got {type(mapping).__name__}",
                    parameter_name=mapping_name,
                    parameter_value=mapping,
                )
            values[mapping_name] = {str(k): (None if v is None else str(v)) for k, v in mapping.items()}

    return _build_dataclass(PdfConvertOptions, values, "options")


def load_options(config_path: Path | str | None = None) -> PdfConvertOptions:
    """Load conversion options from ``config_path`` or a discovered config file.

    Returns default options when no path is given and no file is found.
    """
    if config_path is None:
        config_path = find_config_in_parents()
        if config_path is None:
            return PdfConvertOptions()

    return options_from_dict(load_config_file(config_path))
