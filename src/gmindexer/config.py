import tomllib
from pathlib import Path
from typing import Annotated

import tomlkit
from pydantic import BaseModel, Field, PlainSerializer, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gmindexer.constants import GMORDIE_SS58_PREFIX
from gmindexer.logging import logger

CONFIG_DIR = Path.home() / ".config" / "gmindexer"
CONFIG_FILE = CONFIG_DIR / "config.toml"
DB_PATH = CONFIG_DIR / "gmindexer.db"


class DatabaseSettings(BaseModel):
    # Serialize the path as a string representation of the absolute path
    path: Annotated[
        Path,
        PlainSerializer(lambda path: str(path.absolute()), return_type=str),
    ]

    @field_validator("path", mode="after")
    def expand_path(
        cls,  # noqa: N805
        path: Path,
    ) -> Path:
        return path.expanduser().absolute()


class ChainSettings(BaseModel):
    ss58_prefix: int = Field(default=GMORDIE_SS58_PREFIX, ge=0, le=16383)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GMINDEXER_",
        env_nested_delimiter="__",
    )

    database: DatabaseSettings
    chain: ChainSettings = ChainSettings()


def load_config_from_file(config_path: Path) -> Settings:
    return Settings.model_validate(
        tomllib.loads(
            config_path.read_text(),
        ),
    )


def save_config_to_file(config: Settings) -> None:
    CONFIG_FILE.write_text(
        tomlkit.dumps(
            config.model_dump(),
        ),
    )


if not CONFIG_DIR.exists():
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    logger.info(f"Created a configuration directory at {CONFIG_DIR}.")

if CONFIG_FILE.exists():
    settings = load_config_from_file(CONFIG_FILE)
else:
    settings = Settings(
        database=DatabaseSettings(
            path=DB_PATH,
        ),
    )

    save_config_to_file(settings)
    logger.info(f"Created a configuration file at {CONFIG_FILE}.")
