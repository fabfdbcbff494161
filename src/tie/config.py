import os
from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Settings represents configuration loaded from an optional YAML file."""

    log_level: str = Field(default="INFO")
    supported_languages: List[str] = Field(
        default_factory=lambda: ["python"],
        description="Languages the platform ships language references for.",
    )

    @classmethod
    def get_settings(cls):
        """Get the settings from the configuration file, or the defaults if none is configured."""
        file_path_env = os.environ.get("TIE_CONFIG_PATH")
        if not file_path_env:
            return cls()

        file_path = Path(file_path_env)
        try:
            with open(file_path, "r", encoding="utf-8") as file:
                settings_file = yaml.safe_load(file)
            return cls.model_validate(settings_file or {})
        except FileNotFoundError as e:
            raise FileNotFoundError(
                f"Configuration file not found at {file_path}."
            ) from e
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error parsing YAML file at {file_path}.") from e


settings = Settings.get_settings()
