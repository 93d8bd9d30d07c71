from logging import CRITICAL, DEBUG, ERROR, INFO, WARNING
from os import PathLike
from pathlib import Path
from tomllib import load

from pydantic import BaseModel, field_validator

from katas.core import DEFAULT_BOUND

DEFAULT_CONFIG_PATH = Path("config.toml")


class General(BaseModel):
    title: str = "katas"


class Logging(BaseModel):
    level: int = INFO

    @field_validator("level", mode="before")
    @classmethod
    def convert_log_level(cls, value):
        if isinstance(value, int):
            return value
        log_levels = {
            "DEBUG": DEBUG,
            "INFO": INFO,
            "WARNING": WARNING,
            "ERROR": ERROR,
            "CRITICAL": CRITICAL,
        }
        return log_levels.get(str(value).upper(), INFO)


class Paths(BaseModel):
    logs: str = "logs"


class FizzBuzz(BaseModel):
    default_bound: int = DEFAULT_BOUND
    max_bound: int = 10000  # largest bound accepted over HTTP


class Network(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False


class Config(BaseModel):
    general: General = General()
    paths: Paths = Paths()
    logging: Logging = Logging()
    fizzbuzz: FizzBuzz = FizzBuzz()
    network: Network = Network()


def load_config(
    shared_config_file: PathLike = DEFAULT_CONFIG_PATH,
    specific_config_file: PathLike | None = None,
) -> Config:
    """Load and merge configurations from TOML files.

    A missing shared file yields the built-in defaults.
    """
    config_data = {}

    shared_path = Path(shared_config_file)
    if shared_path.is_file():
        with shared_path.open("rb") as f:
            config_data = load(f)

    # Sections in the specific file replace whole sections of the shared one
    if specific_config_file:
        with Path(specific_config_file).open("rb") as f:
            specific_data = load(f)
            config_data.update(specific_data)

    return Config(**config_data)
