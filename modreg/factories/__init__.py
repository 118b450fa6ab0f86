from .factory import Factory, FactoryRegistry

__all__ = ["Factory", "FactoryRegistry"]
