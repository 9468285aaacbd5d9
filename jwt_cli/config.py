"""
Configuration management for the JWT command-line tool
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Tool settings loaded from environment variables"""

    # Logging
    log_level: str = Field(default="WARNING", alias="JWT_CLI_LOG_LEVEL")

    # Verification
    allowed_algorithms: str = Field(default="HS256,HS384,HS512", alias="JWT_CLI_ALLOWED_ALGORITHMS")

    # Signing secret used when --secret is not given
    secret: str = Field(default="", alias="JWT_CLI_SECRET")

    # Output
    indent: int = Field(default=4, ge=0, le=8, alias="JWT_CLI_INDENT")
    color: bool | None = Field(default=None, alias="JWT_CLI_COLOR")

    @property
    def allowed_algorithms_list(self) -> list[str]:
        """Parse allowed algorithms into a list"""
        return [alg.strip() for alg in self.allowed_algorithms.split(",") if alg.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore"
    )


def get_settings(**overrides) -> Settings:
    """
    Build settings for a single invocation

    Args:
        **overrides: Field values that take precedence over the environment

    Returns:
        Fresh Settings instance
    """
    return Settings(**overrides)
