from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    debug: bool = False
    table: str = "lower"  # Table name (lower, upper) or literal symbols used for a fresh state
    state_path: str = ".identgen.json"  # JSON file holding the persisted (table, ident) pair

    model_config = {
        "env_file": [".env"],
        "env_prefix": "IDENTGEN_",
        "extra": "ignore",
    }
