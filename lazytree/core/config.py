from typing import Any, Optional
import json
import os
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from loguru import logger
from .events import Signal

# --- Settings Models ---
class GeneralSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    debug_mode: bool = True
    log_dir: str = "logs"

class TreeSettings(BaseModel):
    """Behaviour switches shared by every node of a tree."""
    model_config = ConfigDict(validate_assignment=True)

    # Publish TreeNodeSelectedMessage as soon as is_selected becomes True
    auto_publish_selection: bool = False
    # Seconds before a population attempt is abandoned; None waits forever
    load_timeout: Optional[float] = Field(default=None, gt=0)
    # Publish TreeNodeLoadFailedMessage on the node's channel when loading fails
    publish_load_failures: bool = True

class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    tree: TreeSettings = Field(default_factory=TreeSettings)

# --- Manager ---
class ConfigManager:
    """
    Manages configuration with persistence and reactivity.
    """
    def __init__(self, filepath: str = "lazytree.json"):
        self.filepath = filepath
        self._data = AppConfig()
        self.on_changed = Signal("ConfigChanged")
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    @property
    def tree(self) -> TreeSettings:
        return self._data.tree

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic, autosave, and emit change event."""
        if not hasattr(self._data, section):
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if key not in type(section_obj).model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")

        # validate_assignment raises ValidationError on bad values
        setattr(section_obj, key, value)
        self._save()
        self.on_changed.emit(section, key, getattr(section_obj, key))

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def _load(self):
        """Load settings from JSON or TOML file if present; otherwise keep defaults."""
        if os.path.isfile(self.filepath):
            try:
                if self.filepath.endswith('.toml'):
                    import tomllib
                    with open(self.filepath, "rb") as f:
                        raw = tomllib.load(f)
                else:
                    with open(self.filepath, "r", encoding="utf-8") as f:
                        raw = json.load(f)
                self._data = AppConfig.model_validate(raw)
            except (OSError, ValueError, ValidationError) as e:
                logger.error(f"Failed to load config from {self.filepath}: {e}")
                self._save()
        else:
            self._save()

    def _save(self):
        """Persist current config as JSON. TOML sources are never overwritten."""
        if self.filepath.endswith('.toml'):
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except OSError as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")
