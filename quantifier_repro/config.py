"""Settings file loading for the reproduction.

The settings file is a flat JSON document, e.g.::

    {
        "DatabaseServer": "localhost",
        "UserId": "repro",
        "Password": "secret",
        "ServiceName": "FREEPDB1",
        "Port": "1521",
        "DevartLicenseKey": "...",
        "Dialect": "oracle"
    }

JSON is a subset of YAML, so the file is read with OmegaConf like any other config.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from omegaconf import DictConfig, OmegaConf

from quantifier_repro.exceptions import InvalidPortError, MissingSettingError, UnsupportedDialectError

logger = logging.getLogger("Quantifier-Repro")

DEFAULT_SETTINGS_FILE = "appsettings.development.json"
PASSWORD_ENV_VAR = "REPRO_DB_PASSWORD"  # noqa: S105

SUPPORTED_DIALECTS = ["postgresql", "oracle", "sqlite"]
DEFAULT_DIALECT = "postgresql"

REQUIRED_KEYS = ("DatabaseServer", "UserId", "Password", "ServiceName", "Port", "DevartLicenseKey")


@dataclass
class Settings:
    """Connection parameters read from the settings file."""

    database_server: str
    user_id: str
    password: str = field(repr=False)
    service_name: str
    port: int
    license_key: str = field(repr=False)
    dialect: str = DEFAULT_DIALECT

    @classmethod
    def from_file(cls, path: str | Path | None = None) -> "Settings":
        """Load settings from a JSON file.

        Args:
            path: Settings file path. Defaults to ``appsettings.development.json`` in the working directory.

        Returns:
            Settings instance with all required values.

        Raises:
            FileNotFoundError: If the settings file does not exist.
            MissingSettingError: If a required key is absent or empty.
            InvalidPortError: If ``Port`` is not an integer.
            UnsupportedDialectError: If ``Dialect`` names an unknown backend.
        """
        resolved_path = Path(path) if path is not None else Path.cwd() / DEFAULT_SETTINGS_FILE
        if not resolved_path.exists():
            raise FileNotFoundError(resolved_path)

        cfg = OmegaConf.load(resolved_path)
        if not isinstance(cfg, DictConfig):
            raise TypeError(f"{resolved_path.name} must be a JSON object.")  # noqa: TRY003

        logger.info(f"Loaded settings from {resolved_path}")
        return cls.from_mapping(OmegaConf.to_container(cfg, resolve=True))

    @classmethod
    def from_mapping(cls, values: dict) -> "Settings":
        """Build settings from an already parsed mapping of setting keys to values."""
        password = os.environ.get(PASSWORD_ENV_VAR, values.get("Password"))
        values = {**values, "Password": password}

        for key in REQUIRED_KEYS:
            if values.get(key) in (None, ""):
                raise MissingSettingError(key)

        dialect = str(values.get("Dialect") or DEFAULT_DIALECT).lower()
        if dialect not in SUPPORTED_DIALECTS:
            raise UnsupportedDialectError(dialect, SUPPORTED_DIALECTS)

        return cls(
            database_server=str(values["DatabaseServer"]),
            user_id=str(values["UserId"]),
            password=str(values["Password"]),
            service_name=str(values["ServiceName"]),
            port=parse_port(values["Port"]),
            license_key=str(values["DevartLicenseKey"]),
            dialect=dialect,
        )


def parse_port(value: object) -> int:
    """Parse a port number given as an int or an integer-like string."""
    if isinstance(value, bool):
        raise InvalidPortError(value)
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise InvalidPortError(value) from e
