from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = Field(default="Phone Number Generator", alias="APP_NAME")
    validator_app_name: str = Field(default="Phone Number Validator", alias="VALIDATOR_APP_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    database_url: str | None = Field(default=None, alias="DATABASE_URL")
    db_host: str = Field(default="localhost", alias="DB_HOST")
    db_port: int = Field(default=3306, alias="DB_PORT")
    db_user: str = Field(default="phone_user", alias="DB_USER")
    db_password: str = Field(default="phone_pass", alias="DB_PASSWORD")
    db_name: str = Field(default="phone_db", alias="DB_NAME")
    db_pool_size: int = Field(default=5, alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=5, alias="DB_MAX_OVERFLOW")
    db_create_tables: bool = Field(default=True, alias="DB_CREATE_TABLES")

    validator_base_url: str = Field(default="http://microservice:9000", alias="VALIDATOR_BASE_URL")
    validator_timeout: float = Field(default=10.0, alias="VALIDATOR_TIMEOUT")

    model_config = SettingsConfigDict(
        env_file=(".env", ),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def database_url_resolved(self) -> str:
        if self.database_url:
            return self.database_url
        return (
            f"mysql+pymysql://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
            f"?charset=utf8mb4"
        )


settings = Settings()
