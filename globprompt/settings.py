import os


class Settings:
    """Application configuration, loaded from environment or defaults."""

    VERSION: str = "0.1.0"
    APP_NAME: str = "globprompt"

    DEFAULT_PAGE_SIZE: int = 10
    DEFAULT_PATTERN: str = "*"
    DEFAULT_PREFIX: str = "?"

    FORCE_MATCH_ERROR: str = "A matching pattern is required"
    NO_MATCHES_TEXT: str = "No matching files..."

    # Log file goes to current working directory + filename
    LOG_FILE: str = os.environ.get(
        "GLOBPROMPT_LOG_FILE", os.path.join(os.getcwd(), "globprompt.log")
    )


settings = Settings()
