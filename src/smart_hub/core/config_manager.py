# Configuration management
import traceback
from pathlib import Path
from typing import Any, Dict

import yaml

from .observers import OBSERVER_TYPES
from ..devices.factory import DeviceFactory
from ..utils.exceptions import ConfigurationError, SmartHubError
from ..utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG = """
api:
  host: "0.0.0.0"
  port: 8000

hub:
  observers:
    - console
    - logging
  devices:
    - id: 1
      type: "light"
      token: "public"
    - id: 2
      type: "thermostat"
      token: "admin"
    - id: 3
      type: "door"
      token: "admin"
  schedules:
    - id: 1
      time: "07:00"
      command: "turnOff"

scheduler:
  enabled: true
  tick_interval: 1

logging:
  level: "INFO"
  file: "logs/smart_hub.log"
  max_size: 10
  backup_count: 5
  format: "%(asctime)s - %(name)s - [%(levelname)s] - %(message)s"
"""

class ConfigManager:
    """Manages configuration loading and validation"""
    required_sections = ['api', 'hub', 'scheduler', 'logging']

    @classmethod
    def load_config(cls, config_path: str) -> Dict[str, Any]:
        """Load and validate configuration from YAML file"""
        try:
            with open(config_path, 'r') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError:
            raise ConfigurationError(f"Error parsing configuration file: {traceback.format_exc()}")
        except FileNotFoundError:
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        if not isinstance(config, dict):
            raise ConfigurationError("Configuration file is empty or incorrectly formatted")

        missing_sections = [section for section in cls.required_sections if section not in config]
        if missing_sections:
            raise ConfigurationError(f"Missing required configuration sections: {', '.join(missing_sections)}")

        return config

    @staticmethod
    def create_default_config(config_path: Path) -> bool:
        """Create default configuration file if it doesn't exist"""
        if config_path.exists():
            return False
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(DEFAULT_CONFIG)
        return True


async def seed_hub(hub, hub_config: Dict[str, Any]) -> None:
    """Register the observers, devices and schedules listed in the hub config section"""
    for name in hub_config.get('observers') or []:
        observer_class = OBSERVER_TYPES.get(name)
        if observer_class is None:
            raise ConfigurationError(f"Unknown observer type: {name}")
        await hub.add_observer(observer_class())

    for device_config in hub_config.get('devices') or []:
        try:
            device = DeviceFactory.create(device_config['id'], device_config['type'])
            await hub.add_device(device, device_config.get('token', 'public'))
        except (KeyError, ValueError, SmartHubError) as e:
            logger.error(f"Failed to register device {device_config}: {e}")

    for schedule in hub_config.get('schedules') or []:
        try:
            await hub.set_schedule(schedule['id'], schedule['time'], schedule['command'])
        except (KeyError, SmartHubError) as e:
            logger.error(f"Failed to add schedule {schedule}: {e}")
