"""
Pytest fixtures for sportsfeed tests. HTTP is served by httpx.MockTransport.
"""

import inspect

import httpx
import pytest

from sportsfeed.sources import FeedSource, LeagueSource, SourceTable


def make_transport(routes: dict, default=None) -> httpx.MockTransport:
    """
    routes: url -> httpx.Response | Exception | callable(request)
    Unknown URLs get `default` (404 when None).
    """
    async def handler(request: httpx.Request):
        route = routes.get(str(request.url), default)
        if route is None:
            return httpx.Response(404, request=request)
        if isinstance(route, Exception):
            raise route
        if callable(route):
            route = route(request)
            if inspect.isawaitable(route):
                route = await route
        # Fresh copy so the same route can be served twice
        return httpx.Response(route.status_code, headers=route.headers, content=route.content, request=request)

    return httpx.MockTransport(handler)


@pytest.fixture
def transport():
    return make_transport


@pytest.fixture
def test_sources():
    return SourceTable(
        feeds=(
            FeedSource("alpha", "https://feeds.test/alpha.xml"),
            FeedSource("beta", "https://feeds.test/beta.xml"),
            FeedSource("gamma", "https://feeds.test/gamma.xml"),
        ),
        leagues=tuple(
            LeagueSource(lg, f"https://api.test/{lg}/scoreboard", f"https://web.test/{lg}/scoreboard")
            for lg in ("nfl", "nba", "nhl", "mlb")
        ),
    )


@pytest.fixture
def rss_xml():
    return """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Top Headlines</title>
    <link>https://news.test/</link>
    <item><title>Chiefs rally late to beat Bills</title><link>https://news.test/1</link></item>
    <item><title><![CDATA[Celtics extend win streak to 9]]></title><link>https://news.test/2</link></item>
    <item><title>  Oilers sign forward to extension  </title><link>https://news.test/3</link></item>
  </channel>
</rss>
"""


@pytest.fixture
def atom_xml():
    return """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>League News</title>
  <id>urn:test:feed</id>
  <updated>2024-01-15T10:00:00Z</updated>
  <entry>
    <title type="text">Yankees acquire reliever</title>
    <id>urn:test:1</id>
    <updated>2024-01-15T10:00:00Z</updated>
  </entry>
  <entry>
    <id>urn:test:2</id>
    <updated>2024-01-15T10:00:00Z</updated>
  </entry>
  <entry>
    <title></title>
    <id>urn:test:3</id>
    <updated>2024-01-15T10:00:00Z</updated>
  </entry>
  <entry>
    <title>Dodgers finalize rotation</title>
    <id>urn:test:4</id>
    <updated>2024-01-15T10:00:00Z</updated>
  </entry>
</feed>
"""


def competitor(home_away, abbr, score):
    return {"homeAway": home_away, "score": score, "team": {"abbreviation": abbr}}


@pytest.fixture
def scoreboard():
    """Two events, the second one is missing its home competitor."""
    return {
        "leagues": [{"abbreviation": "NFL"}],
        "events": [
            {
                "id": "1",
                "competitions": [{
                    "competitors": [competitor("home", "HME", "5"), competitor("away", "AWY", "3")],
                    "status": {"type": {"name": "STATUS_FINAL", "shortDetail": "Final"}},
                }],
            },
            {
                "id": "2",
                "competitions": [{
                    "competitors": [competitor("away", "LAR", "14")],
                    "status": {"type": {"shortDetail": "Q3 5:12"}},
                }],
            },
        ],
    }


@pytest.fixture
def scoreboard_html():
    return """<!doctype html>
<html><body>
<div class="scoreboard-page">
  <section class="ScoreboardScoreCell">
    <div class="ScoreCell__Time ScoreboardScoreCell__Time"> Final </div>
    <div class="ScoreCell__TeamName"> BOS </div><div class="ScoreCell__Score">102</div>
    <div class="ScoreCell__TeamName">NYK</div><div class="ScoreCell__Score"> 99 </div>
  </section>
  <section class="ScoreboardScoreCell">
    <div class="ScoreCell__TeamName">LAL</div><div class="ScoreCell__Score">10</div>
    <div class="ScoreCell__TeamName">GSW</div>
  </section>
  <div class="ScoreCell">
    <span class="Scoreboard__TeamName">MIA</span><span class="Scoreboard__Score">7</span>
    <span class="Scoreboard__TeamName">CHI</span><span class="Scoreboard__Score">12</span>
  </div>
</div>
</body></html>
"""
