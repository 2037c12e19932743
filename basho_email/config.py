"""
Settings for the Basho email generator.

The OpenAI credential, model and endpoint plus the local server options
come from the environment. A .env file next to the package or at the
project root is read first; variables already set in the environment win.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

_PACKAGE_DIR = Path(__file__).parent
_ENV_FILES = (_PACKAGE_DIR / ".env", _PACKAGE_DIR.parent / ".env")

# First .env found is used
_env_file = next((path for path in _ENV_FILES if path.is_file()), None)
if _env_file is not None:
    load_dotenv(_env_file)


class Config:
    """Application configuration loaded from environment variables."""
    
    # ========================================
    # API Keys
    # ========================================
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    
    # ========================================
    # OpenAI Configuration
    # ========================================
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-3.5-turbo")
    OPENAI_BASE_URL: str = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
    
    # ========================================
    # Server Configuration
    # ========================================
    FLASK_DEBUG: bool = os.getenv("FLASK_DEBUG", "false").lower() == "true"
    API_HOST: str = os.getenv("API_HOST", "127.0.0.1")
    API_PORT: int = int(os.getenv("API_PORT", "5000"))
    
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    
    @classmethod
    def validate(cls) -> list[str]:
        """Validate configuration and return list of errors."""
        errors = []
        
        if not cls.OPENAI_API_KEY:
            errors.append("OPENAI_API_KEY is not set")
        
        if not cls.OPENAI_BASE_URL.startswith(("http://", "https://")):
            errors.append("OPENAI_BASE_URL must be an http(s) URL")
        
        return errors


# Create singleton instance
config = Config()
