from typing import Optional

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from aws_manager.exceptions import ConfigurationError


# =======================
# Logging Settings
# =======================
class LoggingSettings(BaseModel):
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# =======================
# Main Settings
# =======================
class Settings(BaseSettings):
    """Application settings."""
    # Application metadata
    title: str = "AWS Manager"
    version: str = "1.0.0"
    description: str = "Upload and download objects in AWS S3"
    debug: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        env_file_encoding="utf-8",
        env_nested_delimiter="_",
        env_nested_max_split=1,
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingSettings = LoggingSettings()


# =======================
# AWS Connection Settings
# =======================
class AwsSettings(BaseSettings):
    """AWS credentials and default bucket read from the environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    access_key_id: str = Field(validation_alias="AWS_ACCESS_KEY_ID")
    secret_access_key: str = Field(validation_alias="AWS_SECRET_ACCESS_KEY")
    region: str = Field(default="eu-west-1", validation_alias="AWS_REGION")
    bucket: str = Field(validation_alias="AWS_BUCKET")
    token: str = Field(default="", validation_alias="AWS_TOKEN")


class Options(BaseModel):
    """Resolved connection options. Empty string means unset."""
    access_key_id: str = ""
    secret_access_key: str = ""
    region: str = ""
    bucket: str = ""
    token: str = ""

    def has_empty_settings(self) -> bool:
        """True when a credential, the region or the bucket is missing. Token is optional."""
        return any(not v for k, v in self.model_dump().items() if k != "token")


def resolve_options(
    access_key_id: Optional[str] = None,
    secret_access_key: Optional[str] = None,
    region: Optional[str] = None,
    bucket: Optional[str] = None,
    token: Optional[str] = None,
) -> Options:
    """
    Merge explicit options with values from the environment.

    The environment (and .env) is only read when at least one explicit option
    is empty. Non-empty explicit options always win over environment values.

    Raises:
        ConfigurationError: if the environment has to be read and a required
            variable is missing.
    """
    explicit = Options(
        access_key_id=access_key_id or "",
        secret_access_key=secret_access_key or "",
        region=region or "",
        bucket=bucket or "",
        token=token or "",
    )
    resolved = Options()

    if explicit.has_empty_settings():
        try:
            env = AwsSettings()
        except ValidationError as e:
            missing = ", ".join(
                str(err["loc"][0]) for err in e.errors() if err.get("loc")
            )
            raise ConfigurationError(
                f"AWS settings are incomplete, missing: {missing}"
            ) from e
        resolved = Options(**env.model_dump())

    overrides = {f: v for f, v in explicit.model_dump().items() if v}
    return resolved.model_copy(update=overrides)


settings = Settings()
