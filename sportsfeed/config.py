# sportsfeed/config.py
from dataclasses import dataclass

DEFAULT_USER_AGENT = "sportsfeed/0.1 (headline + scoreboard snapshot)"


@dataclass(frozen=True)
class Settings:
    """
    Parámetros de ejecución. Fijos en producción; los tests construyen
    los suyos. Ninguno cambia el formato de los ficheros de salida.
    """
    out_dir: str = "data"
    timeout_ms: int = 15000
    max_items: int = 50
    html_fallback: bool = True
    log_level: str = "INFO"
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def headers(self) -> dict:
        return {"User-Agent": self.user_agent}
