"""Settings schemas"""

from .schemas import FeaturesConfig, LoggingConfig, ModregSettings

__all__ = ["FeaturesConfig", "LoggingConfig", "ModregSettings"]
