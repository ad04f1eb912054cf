"""Load client configuration YAML into a typed dataclass."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ruamel.yaml import YAML

from ._constants import DEFAULT_USER_AGENT
from .errors import SiteXMLConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path


@dc.dataclass(slots=True)
class ClientConfig:
    """Connection and logging settings for a SiteXML client."""

    base_url: str = ""
    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"
    log_json: bool = True


def load_client_config(path: Path) -> ClientConfig:
    """Load the YAML file describing how to reach a SiteXML site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``sitexml.yaml``).

    Returns
    -------
    ClientConfig
        Parsed configuration with defaults applied for missing keys.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteXMLConfigError
        If a value has the wrong shape (for example a non-positive timeout).

    Examples
    --------
    >>> from pathlib import Path
    >>> from sitexml.config import load_client_config
    >>> config = load_client_config(Path("sitexml.yaml"))  # doctest: +SKIP
    >>> config.base_url  # doctest: +SKIP
    'https://example.com'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base = ClientConfig()

    logging_raw = raw.get("logging") or {}
    if not isinstance(logging_raw, dict):
        msg = "'logging' must be a mapping."
        raise SiteXMLConfigError(msg)

    return ClientConfig(
        base_url=str(raw.get("base_url", base.base_url) or "").rstrip("/"),
        timeout=_parse_timeout(raw.get("timeout", base.timeout)),
        user_agent=str(raw.get("user_agent", base.user_agent)),
        log_level=str(logging_raw.get("level", base.log_level)).upper(),
        log_json=bool(logging_raw.get("json", base.log_json)),
    )


def _parse_timeout(value: object) -> float:
    """Return a positive timeout in seconds or raise SiteXMLConfigError."""
    match value:
        case bool():
            timeout = None
        case int() | float():
            timeout = float(value)
        case str() as text:
            try:
                timeout = float(text.strip())
            except ValueError:
                timeout = None
        case _:
            timeout = None
    if timeout is None or timeout <= 0:
        msg = f"'timeout' must be a positive number of seconds, got {value!r}."
        raise SiteXMLConfigError(msg)
    return timeout


__all__ = ["ClientConfig", "load_client_config"]
