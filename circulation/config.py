import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "Library Circulation Desk")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")

    # Activity log (audit trail) settings
    log_file: str = os.getenv("LIBRARY_LOG_FILE", "library_log.txt")
    currency_symbol: str = os.getenv("CURRENCY_SYMBOL", "₹")

    # Diagnostic logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")

    # CLI output: plain | rich | json
    output_mode: str = os.getenv("CIRCULATION_CLI_OUTPUT", "plain")


settings = Settings()
