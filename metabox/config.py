from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Metabox"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Database settings
    database_url: str = "sqlite:///./metabox.db"

    # Rendering settings
    css_prefix: str = "dried"
    image_size: str = "medium"
    attachment_url_template: str = "/media/{attachment_id}/{size}"
    rich_text_media_buttons: bool = True
    rich_text_autop: bool = False

    # Logging settings
    log_level: str = "INFO"
    log_json: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="METABOX_",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
