"""Library configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class FormattingConfig(BaseSettings):
    """Default arguments applied by the NumberHelper facade."""

    model_config = {"env_prefix": "NUMBERHELPER_FORMAT_"}

    number_decimals: int = 0
    number_thousand_separator: str = ","
    price_decimals: int = 2
    price_thousand_separator: str = ""
    currency_code: str = ""  # empty = no symbol prefix
    bytes_decimals: int = 2
    percentage_decimals: int = 0
    percentage_thousand_separator: str = ""


class AppSettings(BaseSettings):
    """Root settings aggregating all sub-configs."""

    model_config = {"env_prefix": "NUMBERHELPER_"}

    log_level: str = "INFO"

    formatting: FormattingConfig = FormattingConfig()
