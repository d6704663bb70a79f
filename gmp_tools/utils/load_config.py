import tomllib
from pathlib import Path

from dacite import from_dict

from gmp_tools.tools.config import MapsConfig
from gmp_tools.utils.config import Config

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.toml"


def load_config(path: Path | str | None = None) -> Config:
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    if not config_path.is_file():
        return Config()
    with open(config_path, "rb") as f:
        config_dict = tomllib.load(f)
    return from_dict(Config, config_dict)


def resolve_logging_config(config: Config, path: Path | str | None = None) -> Path:
    """Locate ``cli.logging_config``; relative paths sit beside the ``config.toml`` at ``path``."""
    logging_config = Path(config.cli.logging_config)
    if logging_config.is_absolute():
        return logging_config
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    return config_path.parent / logging_config


def load_maps_config(config: Config | None = None) -> MapsConfig:
    """Resolve the API key named in ``config.toml`` from the environment."""
    config = config or load_config()
    return MapsConfig.from_env(config.maps.api_key_env)
