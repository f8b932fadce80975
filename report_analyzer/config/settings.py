from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "report_analyzer"
    db_username: str = "report_analyzer"
    db_password: str = "secret"

    pdf_engine: str = "pdfplumber"
    pdf_tables_as_markdown: bool = True

    interpretation_provider: str = "aimlapi"
    interpretation_api_key: str = ""
    interpretation_model_name: str = "gpt-4o"
    interpretation_base_url: str = ""
    interpretation_timeout_seconds: int = 60
    interpretation_max_tokens: int = 2000
