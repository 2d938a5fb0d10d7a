"""
Kinship Lineage Configuration Settings

Graph Layout Configuration:
---------------------------
The force-layout constants used by the lineage graph can be tuned from the
.env file without touching code:
- GRAPH__REPULSION        -> node repulsion factor (default 1000)
- GRAPH__EDGE_LENGTH      -> resting edge length (default 300)
- GRAPH__SYMBOL_SIZE      -> node shape size (default 70)
- GRAPH__NODE_SCALE_RATIO -> zoom scale ratio of nodes (default 1.2)

LOCALE selects the catalog used for category and tooltip captions
(en_US | zh_CN).
"""

from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphSettings(BaseModel):
    """Force layout settings for the lineage graph"""

    repulsion: int = 1000
    edge_length: int = 300
    symbol_size: int = 70
    node_scale_ratio: float = 1.2


class Settings(BaseSettings):
    """Application Settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # App settings
    APP_NAME: str = "kinship-lineage"
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    # Rendering defaults
    LOCALE: str = "en_US"
    SHOW_LABELS: bool = True

    # Graph layout settings
    GRAPH: GraphSettings = GraphSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance
    Using lru_cache ensures settings are loaded once and reused
    """
    return Settings()


# Global settings instance
settings = get_settings()

# Convenience access to graph settings
graph_settings = settings.GRAPH
