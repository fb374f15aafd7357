from typing import List, Optional
from pathlib import Path
from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from .exceptions import ConfigurationError
from .logger import get_logger

logger = get_logger("config")

ENV_FILE_NAME = ".env"

VISIBLE_KEY_CHARS = 20
REDACTION_MARKER = "..."

def default_env_file() -> Path:
    """.env in the directory the command is run from."""
    return Path.cwd() / ENV_FILE_NAME

def load_env_file(env_file: Optional[Path] = None) -> bool:
    """
    Populate os.environ from a .env file.
    Values already present in the environment are left untouched.
    An explicit path must exist; the implicit default may be absent.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            raise ConfigurationError(f"Env file not found: {path}")
    else:
        path = default_env_file()
        if not path.is_file():
            logger.debug("No env file at %s, using process environment only", path)
            return False
    logger.debug("Loading env file %s", path)
    return load_dotenv(path, override=False)

def redact_secret(value: str, visible: int = VISIBLE_KEY_CHARS) -> str:
    """
    Printable form of a credential: a prefix followed by the truncation marker.
    Short values are cut in half so the whole secret never shows up.
    """
    if not value:
        return REDACTION_MARKER
    if len(value) < visible:
        visible = len(value) // 2
    return f"{value[:visible]}{REDACTION_MARKER}"

class PreflightConfig(BaseSettings):
    model_config = SettingsConfigDict(frozen=True, extra="ignore")

    supabase_url: str = ""
    supabase_service_key: str = ""

    @field_validator("supabase_url", "supabase_service_key")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "PreflightConfig":
        load_env_file(env_file)
        return cls()

    def missing_keys(self) -> List[str]:
        missing = []
        if not self.supabase_url:
            missing.append("SUPABASE_URL")
        if not self.supabase_service_key:
            missing.append("SUPABASE_SERVICE_KEY")
        return missing

    def validate_required(self) -> "PreflightConfig":
        missing = self.missing_keys()
        if missing:
            raise ConfigurationError.for_missing(missing)
        return self

    @property
    def redacted_key(self) -> str:
        return redact_secret(self.supabase_service_key)
