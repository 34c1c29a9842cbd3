from pathlib import Path
from typing import Any, Dict, List, Optional
from demo_utils.logger import Logger
import yaml

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"

DEFAULTS: Dict[str, Any] = {
    "logging": {"level": "info", "to_file": False, "log_dir": "Logs"},
    "templating": {
        "engines": ["jinja", "plain"],
        "page": {
            "title": "Página de exemplo",
            "content": "Este é o corpo do conteúdo.",
        },
    },
    "furniture": {"styles": ["modern", "victorian"]},
}


class AppConfig:
    """Demo settings read from a YAML file, falling back to DEFAULTS per key."""

    def __init__(self, path: Optional[Path] = None):
        self.__cfg_path = Path(path) if path else DEFAULT_CONFIG_PATH
        self.__cfg = self.__load()

    def __load(self) -> Dict[str, Any]:
        if not self.__cfg_path.exists():
            Logger().warning(f"Config file not found: {self.__cfg_path}, using defaults")
            return {}
        try:
            with self.__cfg_path.open(encoding="utf-8") as f:
                cfg = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            Logger().error(f"Configuration error: {e}")
            raise
        if not isinstance(cfg, dict):
            raise ValueError(f"Top level of {self.__cfg_path} must be a mapping")
        return cfg

    def __section(self, name: str) -> Dict[str, Any]:
        merged = dict(DEFAULTS[name])
        merged.update(self.__cfg.get(name) or {})
        return merged

    def path(self) -> Path: return self.__cfg_path

    def log_level(self) -> str: return str(self.__section("logging")["level"]).lower()

    def log_to_file(self) -> bool: return bool(self.__section("logging")["to_file"])

    def log_dir(self) -> str: return str(self.__section("logging")["log_dir"])

    def template_engines(self) -> List[str]:
        return [str(e) for e in self.__section("templating")["engines"]]

    def __page(self) -> Dict[str, Any]:
        page = dict(DEFAULTS["templating"]["page"])
        page.update(self.__section("templating")["page"] or {})
        return page

    def page_title(self) -> str: return str(self.__page()["title"])

    def page_content(self) -> str: return str(self.__page()["content"])

    def furniture_styles(self) -> List[str]:
        return [str(s) for s in self.__section("furniture")["styles"]]
