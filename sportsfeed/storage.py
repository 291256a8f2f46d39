# sportsfeed/storage.py
import json
import logging
import os
from typing import List

log = logging.getLogger(__name__)

MAX_ITEMS = 50


class JsonStore:
    def __init__(self, out_dir: str, max_items: int = MAX_ITEMS):
        self.out_dir = out_dir
        self.max_items = max_items
        self._init_dir()

    def _init_dir(self):
        os.makedirs(self.out_dir, exist_ok=True)

    def path(self, filename: str) -> str:
        return os.path.join(self.out_dir, filename)

    def news_path(self, name: str) -> str:
        return self.path(f"news_{name}.json")

    def scores_path(self, league: str) -> str:
        return self.path(f"scores_{league}.json")

    def save(self, path: str, items: List[str]) -> List[str]:
        """
        Sobrescribe el fichero con los primeros max_items elementos
        como array JSON compacto. Devuelve lo escrito.
        """
        kept = list(items[:self.max_items])
        with open(path, "w", encoding="utf-8") as f:
            f.write(json.dumps(kept, ensure_ascii=False, separators=(",", ":")))
        log.debug("Wrote %d items to %s", len(kept), path)
        return kept
