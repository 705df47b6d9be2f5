"""
Persistance des pages boutique : un seul contrat, deux implémentations.

  LocalPageStore : un fichier JSON par boutique (mode appareil unique)
  SqlPageStore   : colonne stores.page_config (SQLite via SQLAlchemy)

Les deux écrivent exactement {"sections": [{"id", "type", "props"}]}.
"""
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Callable, Optional, Protocol, runtime_checkable

from sqlalchemy.orm import Session

from store_builder import PageDocument, from_json, to_json

from . import database
from .models import StoreDB

log = logging.getLogger(__name__)

_SAFE_NAME = re.compile(r"[^A-Za-z0-9_.-]")


@runtime_checkable
class PageStore(Protocol):
    def load_page_document(self, store_id: str) -> Optional[PageDocument]: ...
    def save_page_document(self, store_id: str, document: PageDocument) -> bool: ...


class LocalPageStore:
    """Un fichier <store_id>.json par boutique ; écriture atomique (tmp + rename)."""

    def __init__(self, directory):
        self.directory = Path(directory)

    def _path(self, store_id: str) -> Path:
        return self.directory / f"{_SAFE_NAME.sub('_', store_id)}.json"

    def load_page_document(self, store_id: str) -> Optional[PageDocument]:
        path = self._path(store_id)
        if not path.exists():
            return None
        document = from_json(path.read_text(encoding="utf-8"))
        if document is None:
            log.warning("Page illisible pour %s (%s)", store_id, path)
        return document

    def save_page_document(self, store_id: str, document: PageDocument) -> bool:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(store_id)
        fd, tmp = tempfile.mkstemp(dir=str(self.directory), prefix=".page-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(to_json(document))
            os.replace(tmp, path)
        except OSError as e:
            log.error("Sauvegarde page %s échouée : %s", store_id, e)
            if os.path.exists(tmp):
                os.unlink(tmp)
            return False
        return True


class SqlPageStore:
    """Page stockée dans stores.page_config ; False si la boutique n'existe pas."""

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        self._session_factory = session_factory

    def _session(self) -> Session:
        factory = self._session_factory or database.SessionLocal
        return factory()

    def load_page_document(self, store_id: str) -> Optional[PageDocument]:
        with self._session() as db:
            store = db.get(StoreDB, store_id)
            if store is None or not store.page_config:
                return None
            document = from_json(store.page_config)
            if document is None:
                log.warning("page_config illisible pour %s", store_id)
            return document

    def save_page_document(self, store_id: str, document: PageDocument) -> bool:
        with self._session() as db:
            store = db.get(StoreDB, store_id)
            if store is None:
                return False
            store.page_config = to_json(document)
            db.commit()
        return True


def get_page_store() -> PageStore:
    """PAGE_STORE=sql (défaut) | local ; LOCAL_PAGE_DIR pour le mode local."""
    kind = os.getenv("PAGE_STORE", "sql").lower()
    if kind == "local":
        directory = os.getenv("LOCAL_PAGE_DIR", str(database.DATA_DIR / "pages"))
        return LocalPageStore(directory)
    if kind != "sql":
        log.warning("PAGE_STORE=%r inconnu : stockage SQL utilisé", kind)
    return SqlPageStore()
