from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Koans
    koans_dir: str = ""  # Directory of about_*.py files; empty means the bundled topics
    fail_fast: bool = False

    # Output
    color: bool = True
    show_traceback: bool = False

    # Logging
    debug: bool = False
    json_logs: bool = False

    model_config = {"env_prefix": "KOANS_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
