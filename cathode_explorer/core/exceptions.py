class ExplorerError(Exception):
    """Base exception for all cathode_explorer errors"""
    pass

class ConfigError(ExplorerError):
    """Invalid or inconsistent explorer.json"""
    pass

class DatasetLoadError(ExplorerError):
    """
    The compound dataset could not be produced:
    file missing/unreadable, not JSON, or not a list of record objects
    """
    pass

class EmptyExportError(ExplorerError):
    """Export requested for a filtered view with no records"""
    pass
