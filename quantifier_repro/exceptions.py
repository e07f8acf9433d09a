class MissingSettingError(Exception):
    """Raised when a required key is absent from the settings file."""

    def __init__(self, key: str):
        super().__init__(f"Required setting '{key}' not found.")


class InvalidPortError(ValueError):
    """Raised when the configured port is not a valid integer."""

    def __init__(self, value: object):
        super().__init__(f"Port '{value}' is not a valid integer.")


class UnsupportedDialectError(Exception):
    """Raised when a database dialect has no connection or DDL support."""

    def __init__(self, dialect: str, supported: list[str]):
        supported_str = ", ".join(supported)
        super().__init__(f"Dialect '{dialect}' is not supported. Supported dialects: {supported_str}.")


class SessionNotSetError(Exception):
    """Raised when the database session is not set."""

    def __init__(self):
        super().__init__("Database session is not set.")
