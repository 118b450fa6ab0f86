"""modreg exceptions"""


class ModregError(Exception):
    """Base exception for modreg"""
    pass


class NamespaceAlreadyRegisteredError(ModregError, RuntimeError):
    """A namespace id was registered twice"""

    def __init__(self, namespace: str):
        super().__init__(f"Trying to configure namespace '{namespace}' twice")
        self.namespace = namespace


class FieldBindingError(ModregError):
    """A constructed value could not be written back into its field"""

    def __init__(self, holder: type, field_name: str):
        super().__init__(f"Failed to bind field {holder.__qualname__}.{field_name}")
        self.holder = holder
        self.field_name = field_name


class ConstructionError(ModregError):
    """A factory failed to build an entry"""
    pass


class ConfigurationError(ModregError):
    """Configuration error"""
    pass
