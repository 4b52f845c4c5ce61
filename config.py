"""
Service configuration, read from the environment with a .env file fallback.
"""

from pydantic import BaseModel, ConfigDict
import dotenv

from typing import Literal, Optional
import os


ENGINES = {
    "postgres": "tortoise.backends.asyncpg",
    "mysql": "tortoise.backends.mysql",
    "sqlite": "tortoise.backends.sqlite",
}

DEFAULT_PORTS = {
    "postgres": 5432,
    "mysql": 3306,
}

# models are registered explicitly, never discovered from the filesystem
MODEL_MODULES = ["models.demo"]


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    port: int = 8001
    verbosity: Literal["debug", "verbose", "info", "warn", "warning", "error"] = "info"

    db_dialect: Literal["postgres", "mysql", "sqlite"] = "postgres"
    db_name: str = "demos"
    db_user: Optional[str] = None
    db_password: Optional[str] = None
    db_host: str = "localhost"
    db_port: Optional[int] = None
    db_pool_size: int = 20

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        dotenv.load_dotenv(env_file)

        # only pass what is set, so the field defaults apply to the rest
        values = {
            "port": os.environ.get("PORT") or os.environ.get("APP_PORT"),
            "verbosity": os.environ.get("VERBOSITY", "").lower(),
            "db_dialect": os.environ.get("DB_DIALECT", "").lower(),
            "db_name": os.environ.get("DB_NAME"),
            "db_user": os.environ.get("DB_USER"),
            "db_password": os.environ.get("DB_PASSWORD"),
            "db_host": os.environ.get("DB_HOST"),
            "db_port": os.environ.get("DB_PORT"),
            "db_pool_size": os.environ.get("DB_POOL_SIZE"),
        }
        return cls(**{key: value for key, value in values.items() if value})

    def credentials(self) -> dict:
        if self.db_dialect == "sqlite":
            return {"file_path": self.db_name}

        return {
            "host": self.db_host,
            "port": self.db_port or DEFAULT_PORTS[self.db_dialect],
            "user": self.db_user,
            "password": self.db_password,
            "database": self.db_name,
            "minsize": 1,
            "maxsize": self.db_pool_size,
        }

    def tortoise_config(self) -> dict:
        return {
            'connections': {
                'default': {
                    'engine': ENGINES[self.db_dialect],
                    'credentials': self.credentials(),
                },
            },
            'apps': {
                'models': {
                    'models': MODEL_MODULES,
                    'default_connection': 'default',
                }
            }
        }
