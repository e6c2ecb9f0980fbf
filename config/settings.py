from pydantic import Field
from pydantic_settings import BaseSettings


class CommandSettings(BaseSettings):
    command_prefix: str = Field(default="!", description="Default command prefix")
    enable_mention_prefix: bool = Field(default=True, description="Accept a bot mention as a prefix")
    log_level: str = Field(default="INFO", description="Logging level")

    # Boolean argument parsing
    truthy_values: list[str] = Field(
        default=["true", "1", "yes", "on", "y"],
        description="Tokens accepted as True by the boolean converter",
    )
    falsy_values: list[str] = Field(
        default=["false", "0", "no", "off", "n"],
        description="Tokens accepted as False by the boolean converter",
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = CommandSettings()
