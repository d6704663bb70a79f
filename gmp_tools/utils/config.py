from __future__ import annotations
import dataclasses


@dataclasses.dataclass
class Maps:
    api_key_env: str = "GOOGLE_MAPS_PLATFORM_API_KEY"


@dataclasses.dataclass
class Cli:
    logging_config: str = "config.json"
    indent: int = 2


@dataclasses.dataclass
class Config:
    maps: Maps = dataclasses.field(default_factory=Maps)
    cli: Cli = dataclasses.field(default_factory=Cli)
