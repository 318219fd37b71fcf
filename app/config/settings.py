# app/config/settings.py
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from typing import List, Optional
from urllib.parse import urlparse


class Settings(BaseSettings):
    # App Info
    app_name: str = "Farol CRM API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Supabase - acepta también los nombres usados por el frontend Next.js
    supabase_url: Optional[str] = Field(
        None, validation_alias=AliasChoices("SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL")
    )
    supabase_anon_key: Optional[str] = Field(
        None, validation_alias=AliasChoices("SUPABASE_ANON_KEY", "NEXT_PUBLIC_SUPABASE_ANON_KEY")
    )
    supabase_service_role_key: Optional[str] = Field(
        None, validation_alias=AliasChoices("SUPABASE_SERVICE_ROLE_KEY")
    )

    # Security
    supabase_jwt_secret: Optional[str] = Field(
        None, validation_alias=AliasChoices("SUPABASE_JWT_SECRET")
    )
    jwt_algorithm: str = "HS256"
    jwt_audience: str = "authenticated"

    # CRM
    default_table: str = "Farol"
    superadmin_role: str = "superadmin"
    clientes_page_size: int = 50
    users_list_limit: int = 500
    status_options_limit: int = 2000

    # Server
    cors_origins: List[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 8000

    @property
    def has_service_role(self) -> bool:
        return bool(self.supabase_url and self.supabase_service_role_key)

    @property
    def has_public_client(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)

    @property
    def supabase_host(self) -> str:
        """Host del backend para logs (nunca las llaves)"""
        if not self.supabase_url:
            return "no configurado"
        return urlparse(self.supabase_url).netloc or self.supabase_url

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = 'ignore'
        populate_by_name = True


settings = Settings()
