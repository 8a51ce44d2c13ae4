"""YAML configuration loader for selection requests."""

import os
import yaml
from pathlib import Path
from typing import Dict, Optional, Any

from dotenv import load_dotenv

from selector import SelectionRequest, Strategy


CONFIG_ENV_VAR = "SELECTOR_CONFIG"


class ConfigError(Exception):
    """Malformed selection configuration."""
    pass


class ConfigLoader:
    def __init__(self, config_path: Optional[str] = None):
        if not config_path:
            load_dotenv()
            config_path = os.getenv(CONFIG_ENV_VAR)

        if config_path:
            self.config_path = Path(config_path)
        else:
            self.config_path = Path(__file__).parent / "requests.yaml"

        self._config: Dict[str, Any] = {}
        self._strategy = Strategy.POSITIONAL
        self._requests: Dict[str, SelectionRequest] = {}

    def load(self) -> "ConfigLoader":
        if not self.config_path.exists():
            print(f"[config] No config file at {self.config_path}, using empty config")
            return self

        with open(self.config_path, 'r') as f:
            self._config = yaml.safe_load(f) or {}

        if not isinstance(self._config, dict):
            raise ConfigError(f"Config root must be a mapping: {self.config_path}")

        self._parse_strategy()
        self._parse_requests()

        return self

    def _parse_strategy(self) -> None:
        name = self._config.get('strategy')
        if not name:
            return

        try:
            self._strategy = Strategy(str(name).lower())
        except ValueError:
            choices = ", ".join(s.value for s in Strategy)
            raise ConfigError(f"Unknown strategy '{name}' (expected one of: {choices})") from None

    def _parse_requests(self) -> None:
        tasks = self._config.get('tasks') or {}
        if not isinstance(tasks, dict):
            raise ConfigError("'tasks' must be a mapping of task id to request")

        for task_id, task_config in tasks.items():
            if not isinstance(task_config, dict):
                raise ConfigError(f"{task_id}: request must be a mapping")

            try:
                request = SelectionRequest.from_dict(task_config)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"{task_id}: {e}") from e

            print(f"[config] {task_id}: {len(request.available)} available, "
                  f"{len(request.allowed)} allowed, {len(request.preferred)} preferred")
            self._requests[task_id] = request

    def get_request(self, task_id: str) -> Optional[SelectionRequest]:
        return self._requests.get(task_id)

    def get_all_requests(self) -> Dict[str, SelectionRequest]:
        return self._requests

    def get_strategy(self) -> Strategy:
        return self._strategy


def load_requests(config_path: Optional[str] = None) -> ConfigLoader:
    return ConfigLoader(config_path).load()
