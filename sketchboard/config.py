import os
import logging
from dataclasses import dataclass
from dotenv import load_dotenv, find_dotenv


def _int_env(name, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logging.warning(f"Config: {name}={raw!r} is not a number, using {default}.")
        return default


@dataclass(frozen=True)
class Settings:
    width: int = 800
    height: int = 600
    background: str = "#ffffff"
    export_dir: str = "captures"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv=True):
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        return cls(
            width=_int_env("SKETCHBOARD_WIDTH", cls.width),
            height=_int_env("SKETCHBOARD_HEIGHT", cls.height),
            background=os.getenv("SKETCHBOARD_BACKGROUND", cls.background),
            export_dir=os.getenv("SKETCHBOARD_EXPORT_DIR", cls.export_dir),
            log_level=os.getenv("SKETCHBOARD_LOG_LEVEL", cls.log_level).upper(),
        )
