"""Settings schemas for validation"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class LoggingConfig(BaseModel):
    """Configuration for logging settings"""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


class FeaturesConfig(BaseModel):
    """Enable/disable switches per entry kind"""

    default_enabled: bool = True
    items: Dict[str, bool] = Field(default_factory=dict)
    blocks: Dict[str, bool] = Field(default_factory=dict)


class ModregSettings(BaseModel):
    """Main settings schema for modreg"""

    model_config = ConfigDict(extra="allow")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    features: FeaturesConfig = Field(default_factory=FeaturesConfig)
