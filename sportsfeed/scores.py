# sportsfeed/scores.py
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional

import httpx
from bs4 import BeautifulSoup

from sportsfeed.fetch import DEFAULT_TIMEOUT_MS, ParseFailure, fetch_json, fetch_text
from sportsfeed.sources import LeagueSource

log = logging.getLogger(__name__)


def format_line(away: str, away_score: str, home: str, home_score: str, status: str) -> str:
    # Con status vacío la línea termina en espacio
    return f"{away} {away_score} @ {home} {home_score} {status}"


def _text(value: Any) -> str:
    return "" if value is None else str(value)


# --- Scoreboard JSON (ESPN site API) ---

@dataclass
class Competitor:
    home_away: str
    abbreviation: Optional[str]  # None si falta el objeto "team"
    score: str

    @classmethod
    def from_dict(cls, data: dict) -> "Competitor":
        team = data.get("team")
        abbr = _text(team.get("abbreviation")) if isinstance(team, dict) else None
        return cls(
            home_away=_text(data.get("homeAway")),
            abbreviation=abbr,
            score=_text(data.get("score")),
        )


@dataclass
class Competition:
    competitors: List[Competitor] = field(default_factory=list)
    status: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Competition":
        raw = data.get("competitors")
        competitors = [Competitor.from_dict(c) for c in raw if isinstance(c, dict)] if isinstance(raw, list) else []

        status = ""
        st = data.get("status")
        if isinstance(st, dict) and isinstance(st.get("type"), dict):
            status = _text(st["type"].get("shortDetail"))
        return cls(competitors=competitors, status=status)

    def side(self, home_away: str) -> Optional[Competitor]:
        for c in self.competitors:
            if c.home_away == home_away:
                return c
        return None


@dataclass
class Event:
    competition: Optional[Competition]

    @classmethod
    def from_dict(cls, data: dict) -> "Event":
        comps = data.get("competitions")
        first = comps[0] if isinstance(comps, list) and comps else None
        return cls(competition=Competition.from_dict(first) if isinstance(first, dict) else None)

    def line(self) -> Optional[str]:
        c = self.competition
        if c is None:
            return None
        away = c.side("away")
        home = c.side("home")
        if away is None or home is None:
            return None
        # Un equipo sin "team" invalida el payload entero y manda la liga al HTML
        if away.abbreviation is None or home.abbreviation is None:
            raise ParseFailure("Competitor without team object")
        return format_line(away.abbreviation, away.score, home.abbreviation, home.score, c.status)


@dataclass
class Scoreboard:
    events: List[Event]

    @classmethod
    def from_dict(cls, data: Any) -> "Scoreboard":
        if not isinstance(data, dict):
            raise ParseFailure(f"Scoreboard payload is {type(data).__name__}, expected object")
        events = data.get("events")
        if events is None:
            events = []
        if not isinstance(events, list):
            raise ParseFailure("Scoreboard 'events' is not a list")
        return cls(events=[Event.from_dict(ev) for ev in events if isinstance(ev, dict)])


def parse_scoreboard(data: Any) -> List[str]:
    """
    Convierte el JSON del scoreboard en líneas "AWY 3 @ HME 5 Final".
    Los eventos sin competición o sin alguno de los dos equipos se saltan.
    """
    out = []
    for ev in Scoreboard.from_dict(data).events:
        line = ev.line()
        if line is not None:
            out.append(line)
    return out


# --- Scoreboard HTML (scraping) ---

@dataclass(frozen=True)
class SelectorSet:
    """
    Selectores CSS del scoreboard renderizado. El marcado de la web cambia a
    menudo: se espera tener que actualizarlos de vez en cuando.
    """
    cell: str
    team: str
    score: str
    status: str


ESPN_SELECTORS = SelectorSet(
    cell=".ScoreboardScoreCell, .scoreboard-page .ScoreCell",
    team=".ScoreCell__TeamName, .Scoreboard__TeamName",
    score=".ScoreCell__Score, .Scoreboard__Score",
    status=".ScoreCell__Time, .ScoreboardScoreCell__Time",
)


def parse_scoreboard_html(html: str, selectors: SelectorSet = ESPN_SELECTORS) -> List[str]:
    soup = BeautifulSoup(html, "html.parser")
    out = []
    for cell in soup.select(selectors.cell):
        teams = [t.get_text().strip() for t in cell.select(selectors.team)]
        scores = [s.get_text().strip() for s in cell.select(selectors.score)]
        if len(teams) < 2 or len(scores) < 2:
            continue

        st = cell.select_one(selectors.status)
        status = st.get_text().strip() if st is not None else ""
        out.append(format_line(teams[0], scores[0], teams[1], scores[1], status))
    return out


# --- Fuentes de marcadores ---

class ScoreSource(ABC):
    def __init__(self, timeout_ms: int = DEFAULT_TIMEOUT_MS):
        self.timeout_ms = timeout_ms

    @abstractmethod
    async def fetch(self, client: httpx.AsyncClient, league: LeagueSource) -> List[str]:
        ...


class ApiScoreSource(ScoreSource):
    async def fetch(self, client: httpx.AsyncClient, league: LeagueSource) -> List[str]:
        data = await fetch_json(client, league.api_url, self.timeout_ms)
        return parse_scoreboard(data)


class HtmlScoreSource(ScoreSource):
    """
    Fuente orientativa: cualquier fallo devuelve [] en lugar de propagarse.
    """
    def __init__(self, timeout_ms: int = DEFAULT_TIMEOUT_MS, selectors: SelectorSet = ESPN_SELECTORS):
        super().__init__(timeout_ms)
        self.selectors = selectors

    async def fetch(self, client: httpx.AsyncClient, league: LeagueSource) -> List[str]:
        try:
            html = await fetch_text(client, league.html_url, self.timeout_ms)
            return parse_scoreboard_html(html, self.selectors)
        except Exception as ex:
            log.warning("HTML scoreboard failed for %s: %r", league.league, ex)
            return []


async def fetch_league_scores(client: httpx.AsyncClient, league: LeagueSource,
                              api: ScoreSource, html: Optional[ScoreSource]) -> List[str]:
    """
    API -> scraping HTML -> []. Nunca lanza.
    """
    try:
        lines = await api.fetch(client, league)
        if lines:
            return lines
        log.info("%s: API returned no games, trying HTML scoreboard", league.league)
    except Exception as ex:
        log.warning("%s: API failed (%r), trying HTML scoreboard", league.league, ex)

    if html is None:
        return []
    try:
        return await html.fetch(client, league)
    except Exception as ex:
        log.warning("%s: HTML fallback failed: %r", league.league, ex)
        return []
