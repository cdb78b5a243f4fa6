"""
Load configuration from `config.toml`.
"""

import re
from pathlib import Path
from pydantic import BaseModel, field_validator

THIS_DIR = Path(__file__).parent.resolve()

CONFIG_FILE_PATH = THIS_DIR / "config.toml"

HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


class Config(BaseModel):
    timeout_s: int
    viewport_width: int
    min_region_height: float  # px, floor applied to every stored region
    compact_height_threshold: float  # px, regions below this get the compact badge
    fallback_icon: str
    fallback_color: str
    container_width: int
    background_color: str
    container_background_color: str
    font_family: str
    og_width: int
    og_height: int
    product_name: str
    product_tagline: str

    @field_validator(
        "timeout_s",
        "viewport_width",
        "container_width",
        "og_width",
        "og_height",
        mode="before",
    )
    def positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be positive.")
        return value

    @field_validator("min_region_height", "compact_height_threshold", mode="before")
    def non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("Value must not be negative.")
        return value

    @field_validator("fallback_color", "background_color", "container_background_color", mode="before")
    def hex_color(cls, value: str) -> str:
        if not HEX_COLOR.match(str(value)):
            raise ValueError(f"Invalid hex color: {value}")
        return value


def load_config() -> Config:
    import tomli

    with open(CONFIG_FILE_PATH, "rb") as f:
        data = tomli.load(f)

    config_data = {k.lower(): v for k, v in data.items()}
    return Config(**config_data)


config = load_config()


def get_config() -> Config:
    """Return the active config, honouring `set_config` overrides."""
    return config


def set_config(new_config: Config) -> None:
    global config
    config = new_config


__all__ = ["Config", "config", "get_config", "set_config"]  # allow users to set a new config if needed

if __name__ == "__main__":
    print(config)
