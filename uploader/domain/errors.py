class UploaderError(Exception):
    pass


class FatalError(UploaderError):
    """Aborts the whole run. Raised in services, reported at the CLI boundary."""


class SettingsError(FatalError):
    pass


class ConfigError(FatalError):
    def __init__(self, message, *, path=None):
        super().__init__(message)
        self.path = path


class ArchiveError(FatalError):
    def __init__(self, message, *, path=None):
        super().__init__(message)
        self.path = path


class ProjectError(FatalError):
    pass
