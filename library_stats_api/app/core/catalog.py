"""
Loading of the library catalog from JSON files.

The catalog is three JSON arrays stored side by side in one directory:
``accounts.json``, ``books.json`` and ``authors.json``.  ``load_catalog``
parses them into a ``Catalog`` snapshot; ``get_catalog`` is the FastAPI
dependency that loads a fresh snapshot from ``settings.data_dir`` for
every request.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from library_stats_api.app.core.config import settings
from library_stats_api.app.schemas.account import Account
from library_stats_api.app.schemas.author import Author
from library_stats_api.app.schemas.book import Book

ModelT = TypeVar("ModelT", bound=BaseModel)


class CatalogError(RuntimeError):
    """Raised when a catalog file is missing or malformed."""


@dataclass(frozen=True)
class Catalog:
    """Read‑only snapshot of the three catalog collections."""

    accounts: List[Account] = field(default_factory=list)
    books: List[Book] = field(default_factory=list)
    authors: List[Author] = field(default_factory=list)


def get_data_dir() -> Path:
    """Resolve ``settings.data_dir``.

    Absolute paths are used as is; relative ones are resolved against
    the project root.
    """
    if os.path.isabs(settings.data_dir):
        return Path(settings.data_dir)
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return (base_dir / settings.data_dir).resolve()


def _load_records(path: Path, model: Type[ModelT]) -> List[ModelT]:
    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        raise CatalogError(f"Catalog file not found: {path}") from e
    except OSError as e:
        raise CatalogError(f"Cannot read catalog file {path}: {e}") from e
    try:
        return TypeAdapter(List[model]).validate_python(json.loads(raw.decode("utf-8")))
    except UnicodeDecodeError as e:
        raise CatalogError(f"{path.name} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"{path.name} is not valid JSON: {e}") from e
    except ValidationError as e:
        raise CatalogError(f"{path.name} does not match the {model.__name__} schema: {e}") from e


def load_catalog(data_dir: Union[str, Path]) -> Catalog:
    """Load accounts, books and authors from ``data_dir``."""
    logger = logging.getLogger(__name__)
    data_path = Path(data_dir)
    catalog = Catalog(
        accounts=_load_records(data_path / "accounts.json", Account),
        books=_load_records(data_path / "books.json", Book),
        authors=_load_records(data_path / "authors.json", Author),
    )
    logger.info(
        "Loaded catalog from %s: %d accounts, %d books, %d authors",
        data_path,
        len(catalog.accounts),
        len(catalog.books),
        len(catalog.authors),
    )
    return catalog


def get_catalog() -> Catalog:
    """FastAPI dependency returning the catalog configured in settings."""
    return load_catalog(get_data_dir())
