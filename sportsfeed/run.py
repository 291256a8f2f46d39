# sportsfeed/run.py
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import httpx

from sportsfeed.config import Settings
from sportsfeed.feeds import extract_titles
from sportsfeed.fetch import fetch_text, make_client
from sportsfeed.scores import ApiScoreSource, HtmlScoreSource, fetch_league_scores
from sportsfeed.sources import DEFAULT_SOURCES, FeedSource, SourceTable
from sportsfeed.storage import JsonStore

log = logging.getLogger(__name__)


@dataclass
class RunResult:
    news: Dict[str, List[str]] = field(default_factory=dict)
    scores: Dict[str, List[str]] = field(default_factory=dict)


async def update_feed(client: httpx.AsyncClient, store: JsonStore, feed: FeedSource, timeout_ms: int) -> List[str]:
    path = store.news_path(feed.name)
    try:
        xml = await fetch_text(client, feed.url, timeout_ms)
        titles = extract_titles(xml)
    except Exception as ex:
        log.warning("Feed %s failed: %r", feed.name, ex)
        titles = []
    return store.save(path, titles)


async def run(settings: Settings, sources: SourceTable = DEFAULT_SOURCES,
              client: Optional[httpx.AsyncClient] = None) -> RunResult:
    store = JsonStore(settings.out_dir, max_items=settings.max_items)
    api = ApiScoreSource(settings.timeout_ms)
    # Sin scraping HTML el fallback devuelve [] directamente
    html = HtmlScoreSource(settings.timeout_ms) if settings.html_fallback else None

    own_client = client is None
    if own_client:
        client = make_client(settings.headers, settings.timeout_ms)

    result = RunResult()
    try:
        # Feeds: uno detrás de otro
        for feed in sources.feeds:
            result.news[feed.name] = await update_feed(client, store, feed, settings.timeout_ms)

        # Marcadores: todas las ligas a la vez
        lines = await asyncio.gather(*(
            fetch_league_scores(client, lg, api, html) for lg in sources.leagues
        ))
        for lg, scores in zip(sources.leagues, lines):
            result.scores[lg.league] = store.save(store.scores_path(lg.league), scores)
    finally:
        if own_client:
            await client.aclose()

    return result


def main():
    settings = Settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")

    result = asyncio.run(run(settings))

    news = " | ".join(f"{k}: {len(v)}" for k, v in result.news.items())
    scores = " | ".join(f"{k}: {len(v)}" for k, v in result.scores.items())
    print(f"News -> {news}")
    print(f"Scores -> {scores}")
    print(f"Out: {settings.out_dir}/")
    print("Feeds and scores updated.")


if __name__ == "__main__":
    main()
