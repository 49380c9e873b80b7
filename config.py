from decimal import Decimal
from typing import Optional

from pydantic import PrivateAttr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Application Document API"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "sqlite+aiosqlite:///./application_documents.db"
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    # Values surfaced on every generated document
    support_email: str = "support@example.com"
    signature: str = "The Client Services Team"
    tax_rate: Decimal = Decimal("0.85")

    template_dir: str = "./templates"
    template_url_prefix: str = "/templates"
    # Falls back to the request base URL when unset
    document_base_uri: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    _is_sqlite: bool = PrivateAttr(default=False)

    def model_post_init(self, __context: object) -> None:
        _scheme = self.database_url.split(":")[0].lower()
        object.__setattr__(self, "_is_sqlite", "sqlite" in _scheme)

    @property
    def is_sqlite(self) -> bool:
        return self._is_sqlite


settings = Settings()
