"""
Config Manager

Main configuration manager with include system support.
Loads modular YAML files and exposes typed settings for the engine.
"""

import yaml
from pathlib import Path
from typing import Dict, List, Optional, Union

from zoomline.models.auto_zoom import AutoZoomConfig
from zoomline.models.enums import LogCategory, LogLevel
from zoomline.models.zoom_state import TransformOptions
from zoomline.utils.enum_helper import EnumHelper
from zoomline.utils.logger import configure_logger, get_logger

log = get_logger().for_category(LogCategory.CONFIG)

CONFIG_DIR = Path(__file__).parent.parent / "config"


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads zoom.yaml and processes the include: directive to load modular
    YAML files. Falls back to factory_defaults.yaml when the main config
    cannot be loaded.

    Example:
        config = ConfigManager()
        config.load()
        config.apply_logging()

        options = config.get_transform_options(1920, 1080)
        auto_cfg = config.get_auto_zoom_config()
    """

    def __init__(
        self,
        config_path: Union[str, Path] = CONFIG_DIR / "zoom.yaml",
        defaults_path: Union[str, Path] = CONFIG_DIR / "factory_defaults.yaml"
    ):
        """
        Initialize ConfigManager

        Args:
            config_path: Path to main zoom.yaml
            defaults_path: Path to factory defaults fallback
        """
        self.config_path = Path(config_path)
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict = {}

    def load(self) -> Dict:
        """
        Load YAML configuration with include system support

        Process:
        1. Load main zoom.yaml
        2. If it has 'include:' list, load and merge those files
        3. Otherwise treat it as a monolithic config
        4. Fallback to factory defaults on failure

        Returns:
            Merged config data dict
        """
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                main_config = yaml.safe_load(f) or {}

            if "include" in main_config:
                log.info("Using include-based configuration")
                self.data = self._load_with_includes(main_config["include"], self.config_path.parent)
            else:
                log.info("Using monolithic configuration")
                self.data = main_config

        except Exception as ex:
            log.error(f"Failed to load {self.config_path.name}", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")

            with open(self.factory_defaults_path, "r", encoding="utf-8") as f:
                self.data = yaml.safe_load(f) or {}

        return self.data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: List of filenames to load (e.g., ["transform.yaml", "auto_zoom.yaml"])
            config_dir: Directory containing config files

        Returns:
            Merged config dict (later files win on key clashes)
        """
        merged = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                with open(filepath, "r", encoding="utf-8") as f:
                    file_data = yaml.safe_load(f)
                    if file_data:
                        merged.update(file_data)
                        log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise
            except Exception as ex:
                log.error(f"Error loading {filename}", error=str(ex))
                raise

        log.info("Config merge complete", total_keys=len(merged))
        return merged

    # ===== Sections =====

    def _section(self, name: str) -> Dict:
        section = self.data.get(name) or {}
        if not isinstance(section, dict):
            raise ValueError(f"Config section '{name}' must be a mapping, got {type(section).__name__}")
        return section

    def get_transform_options(self, frame_width: float, frame_height: float) -> TransformOptions:
        """
        Transform clamping options for a frame size

        Args:
            frame_width: Preview frame width in pixels
            frame_height: Preview frame height in pixels
        """
        section = self._section("transform")
        return TransformOptions(
            frame_width=frame_width,
            frame_height=frame_height,
            edge_padding_px=section.get("edge_padding_px"),
            corner_radius_px=section.get("corner_radius_px"),
        )

    def get_auto_zoom_config(self) -> AutoZoomConfig:
        section = self._section("auto_zoom")
        return AutoZoomConfig(
            scale=section.get("scale", 2.0),
            hold_duration_ms=section.get("hold_duration_ms", 1500),
            min_gap_ms=section.get("min_gap_ms", 500),
            left_clicks_only=section.get("left_clicks_only", True),
        )

    def get_log_level(self) -> LogLevel:
        level = self._section("logging").get("level", "INFO")
        return EnumHelper.from_string(LogLevel, str(level), default=LogLevel.INFO)

    def apply_logging(self, stream=None) -> None:
        """Push the logging section into the logger singleton"""
        section = self._section("logging")
        configure_logger(
            min_level=self.get_log_level(),
            use_colors=bool(section.get("use_colors", True)),
            stream=stream,
        )

    def get(self, key: str, default: Optional[object] = None):
        return self.data.get(key, default)
