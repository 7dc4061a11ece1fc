"""Configuration schema using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class HttpConfig(Base):
    """Outbound HTTP settings shared by every backend."""

    user_agent: str = Field(min_length=1)
    timeout: float = Field(default=10.0, gt=0)


class GoogleConfig(Base):
    """Google Images reverse search (HTML scrape)."""

    search_url: str = Field(default="https://www.google.com/searchbyimage/upload", min_length=1)
    locale: str = "en"
    max_results: int = Field(default=4, ge=1)
    # Marker pairs around the "possible related search" term and the result links
    search_term_prefix: str = Field(min_length=1)
    search_term_suffix: str = Field(min_length=1)
    result_link_prefix: str = Field(min_length=1)
    result_link_suffix: str = Field(min_length=1)


class SaucenaoConfig(Base):
    """saucenao.com JSON API. The api key is appended to search_url."""

    search_url: str = Field(
        default="https://saucenao.com/search.php?output_type=2&api_key=", min_length=1
    )
    api_key: str = Field(min_length=1)
    low_similarity_threshold: float = 60.0


class LoggingConfig(Base):
    """Log sinks. An empty file disables the file sink."""

    level: str = "INFO"
    file: str = "saucebot.log"


class Config(Base):
    """Root configuration for saucebot."""

    http: HttpConfig
    google: GoogleConfig
    saucenao: SaucenaoConfig
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
