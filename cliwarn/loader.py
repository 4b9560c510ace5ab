"""Warning spec loader.

Keeps warning texts in their own file instead of scattering them across a
tool's source.

Supported files:
    warnings.py    module-level ``WARNINGS`` mapping or list
    warnings.json  JSON object or array
    warnings.yaml  YAML mapping or list (``.yml`` too)

Example YAML (warnings.yaml):
    old-flag:
      message: "--old-flag is deprecated, use --new-flag"
    legacy-node:
      message:
        - "Node versions before 18 are no longer tested."
        - "Please upgrade."
      match: "^v?1[0-7]\\."
    unexpected-mode:
      message: "mode=fast skips validation"
      when: fast

Data files cannot hold functions or compiled patterns, so a spec may give a
``match`` regular expression instead; it becomes a pattern conditional.

Usage:
    from cliwarn.loader import load_warnings
    specs = load_warnings("./warnings.yaml")
"""

from __future__ import annotations

import importlib.util
import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

import yaml

from cliwarn.exceptions import SpecLoadError

logger = logging.getLogger(__name__)

__all__ = [
    "SUPPORTED_SUFFIXES",
    "compile_match",
    "load_warnings",
]

SUPPORTED_SUFFIXES = (".py", ".json", ".yaml", ".yml")

RawSpecs = Union[Dict[str, Any], List[Any]]


def _load_python(path: Path) -> Any:
    module_name = f"_cliwarn_specs_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise SpecLoadError("Cannot import warnings module", path=str(path))

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        raise SpecLoadError("Failed to import warnings module", path=str(path), cause=e) from e

    if not hasattr(module, "WARNINGS"):
        raise SpecLoadError("Warnings module has no WARNINGS attribute", path=str(path))
    return module.WARNINGS


def _load_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise SpecLoadError("Invalid JSON syntax", path=str(path), cause=e) from e


def _load_yaml(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SpecLoadError("Invalid YAML syntax", path=str(path), cause=e) from e


def compile_match(spec: Any, path: str = "") -> Any:
    """Replace a spec's ``match`` regex string with a compiled pattern conditional.

    Specs that already carry ``conditional`` or ``when`` keep them and their
    ``match`` field is left alone.

    Raises:
        SpecLoadError: If the regular expression does not compile
    """
    if not isinstance(spec, Mapping) or "match" not in spec:
        return spec
    if "conditional" in spec or "when" in spec:
        logger.debug("Ignoring 'match' on spec %s: conditional already given", spec.get("name"))
        return spec

    data = dict(spec)
    pattern = data.pop("match")
    try:
        data["conditional"] = re.compile(pattern)
    except (re.error, TypeError) as e:
        raise SpecLoadError(f"Invalid match pattern {pattern!r}", path=path or None, cause=e) from e
    return data


def load_warnings(path: Union[str, Path]) -> RawSpecs:
    """Load raw warning specs from a file.

    Args:
        path: Path to a ``.py``, ``.json``, ``.yaml`` or ``.yml`` file

    Returns:
        Mapping of name -> raw spec, or a list of raw specs carrying ``name``

    Raises:
        FileNotFoundError: If the file doesn't exist
        SpecLoadError: If the file is unsupported, malformed or has the wrong shape
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Warnings file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".py":
        data = _load_python(path)
    elif suffix == ".json":
        data = _load_json(path)
    elif suffix in (".yaml", ".yml"):
        data = _load_yaml(path)
    else:
        valid = ", ".join(SUPPORTED_SUFFIXES)
        raise SpecLoadError(f"Unsupported warnings file type '{suffix}'. Valid options: {valid}", path=str(path))

    if data is None:
        raise SpecLoadError("Empty warnings file", path=str(path))

    if isinstance(data, Mapping):
        result: RawSpecs = {name: compile_match(spec, str(path)) for name, spec in data.items()}
    elif isinstance(data, (list, tuple)):
        result = [compile_match(spec, str(path)) for spec in data]
    else:
        raise SpecLoadError(
            f"Warnings file must contain a mapping or a list, got {type(data).__name__}",
            path=str(path),
        )

    logger.debug("Loaded %d warning specs from %s", len(result), path)
    return result
