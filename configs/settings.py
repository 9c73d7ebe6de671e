"""
Application configuration
"""
from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional
from pathlib import Path

env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    """Application settings"""
    
    # Basic application configuration
    app_name: str = Field(default="Collab-Hub", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    
    # Server configuration
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")
    
    # Log configuration
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_max_size: int = Field(default=10485760, alias="LOG_MAX_SIZE")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")
    
    # Messaging configuration
    message_max_length: int = Field(default=5000, alias="MESSAGE_MAX_LENGTH")
    messaging_validate_participants: bool = Field(default=True, alias="MESSAGING_VALIDATE_PARTICIPANTS")
    allow_self_messages: bool = Field(default=False, alias="ALLOW_SELF_MESSAGES")
    
    # Optional admin account created on startup
    seed_admin_username: Optional[str] = Field(default=None, alias="SEED_ADMIN_USERNAME")
    seed_admin_email: Optional[str] = Field(default=None, alias="SEED_ADMIN_EMAIL")
    seed_admin_password: Optional[str] = Field(default=None, alias="SEED_ADMIN_PASSWORD")
    
    model_config = {
        "env_file": env_path,
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "allow"
    }


settings = Settings()
