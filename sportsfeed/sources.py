# sportsfeed/sources.py
from dataclasses import dataclass
from typing import Tuple

ESPN_API = "https://site.api.espn.com/apis/site/v2/sports"
ESPN_WEB = "https://www.espn.com"


@dataclass(frozen=True)
class FeedSource:
    name: str  # se usa para el nombre del fichero: news_<name>.json
    url: str


@dataclass(frozen=True)
class LeagueSource:
    league: str
    api_url: str
    html_url: str


@dataclass(frozen=True)
class SourceTable:
    feeds: Tuple[FeedSource, ...]
    leagues: Tuple[LeagueSource, ...]

    def league(self, key: str) -> LeagueSource:
        for lg in self.leagues:
            if lg.league == key:
                return lg
        raise KeyError(key)


def espn_league(league: str, sport: str) -> LeagueSource:
    return LeagueSource(
        league=league,
        api_url=f"{ESPN_API}/{sport}/{league}/scoreboard",
        html_url=f"{ESPN_WEB}/{league}/scoreboard",
    )


DEFAULT_SOURCES = SourceTable(
    feeds=(
        FeedSource("espn", "https://www.espn.com/espn/rss/news"),
        FeedSource("nhl", "https://www.nhl.com/rss/news"),
        FeedSource("fox", "https://www.foxsports.com/feedout/syndicatedContent?categoryId=0"),
    ),
    leagues=(
        espn_league("nfl", "football"),
        espn_league("nba", "basketball"),
        espn_league("nhl", "hockey"),
        espn_league("mlb", "baseball"),
    ),
)
