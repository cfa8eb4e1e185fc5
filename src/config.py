from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "docs-image-extractor"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"
    cors_origins: list[str] = ["*"]

    export_url: str = "https://docs.google.com/feeds/download/documents/export/Export"
    export_format: str = "docx"
    fetch_timeout: float = 15.0
    fetch_max_retries: int = 1
    max_export_bytes: int = 52428800
    proxies: dict[str, list[str]] = {}
    proxy_strategy: str = "round-robin"

    api_base_url: str = "http://localhost:8000"
    thumbnail_width: int = 320
    thumbnail_height: int = 212
    download_dir: str = "downloads"
    archive_name: str = "selected_images.zip"
    max_concurrent_downloads: int = 5


settings = Settings()
