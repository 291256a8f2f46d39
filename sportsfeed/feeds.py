# sportsfeed/feeds.py
import logging
from typing import List, Union

import feedparser

log = logging.getLogger(__name__)


def entry_title(entry) -> str:
    # feedparser normaliza <title> (texto plano, CDATA o nodo con atributos)
    detail = entry.get("title_detail")
    if detail is not None and detail.get("value"):
        return detail["value"].strip()
    return (entry.get("title") or "").strip()


def extract_titles(xml: Union[str, bytes]) -> List[str]:
    """
    Titulares de un feed RSS 2.0 o Atom, en el orden del documento.
    Los títulos vacíos se descartan; aquí no se recorta la lista.
    """
    feed = feedparser.parse(xml)
    if feed.bozo and not feed.entries:
        log.debug("Feed without entries (bozo): %r", feed.get("bozo_exception"))

    titles = []
    for e in feed.entries:
        t = entry_title(e)
        if t:
            titles.append(t)
    return titles
