class WsViewsError(Exception):
    """Base exception for all ws_views errors"""
    pass

class UnknownView(WsViewsError, KeyError):
    """
    A view name was used that is not present in the registry
    Raised from explicit user paths (switching, direct lookups)
    """

    def __init__(self, name):
        self.name = name
        super().__init__(f"View '{name}' not found")

    def __str__(self) -> str:
        # KeyError repr-quotes its argument otherwise
        return self.args[0]

class InvalidArgument(WsViewsError, TypeError):
    """An operand was not of the type the operation requires (e.g. not a View)"""
    pass

class ConfigError(WsViewsError):
    """Invalid or inconsistent global.json / view config"""
    pass
