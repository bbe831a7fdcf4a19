"""
Configuration settings for the csvToJson package.

Configuration can be set via:
1. Command-line arguments (highest priority)
2. Environment variables (CSVTOJSON_ prefix, .env files supported)
3. Configuration files (YAML/JSON)
4. Default values (lowest priority)
"""

import os
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

# Set up logger
logger = logging.getLogger(__name__)


# Default configuration paths
DEFAULT_CONFIG_PATHS = [
    Path.cwd() / "csvtojson.yml",
    Path.cwd() / "csvtojson.yaml",
    Path.cwd() / "csvtojson.json",
    Path.home() / ".config" / "csvtojson.yml",
    Path.home() / ".config" / "csvtojson.yaml",
    Path.home() / ".config" / "csvtojson.json",
    Path.home() / ".csvtojson.yml",
    Path.home() / ".csvtojson.yaml",
    Path.home() / ".csvtojson.json",
]

ENV_PREFIX = "CSVTOJSON_"

# Input settings
CSV_PATTERN = "*.csv"
CSV_ENCODING = "utf-8"

# Output settings
DEFAULT_INDENT = 2
DOWNLOAD_FILENAME = "converted-data.json"
DOWNLOAD_MIME_TYPE = "application/json"

# Pause before conversion, in seconds (loading-state smoothing only)
DEFAULT_DELAY = 0.0

DEFAULT_OUTPUT_OPTIONS: Dict[str, Any] = {
    "indent": DEFAULT_INDENT,
    "encoding": CSV_ENCODING,
    "download_filename": DOWNLOAD_FILENAME,
    "delay": DEFAULT_DELAY,
}


class ConfigManager:
    """
    Configuration manager that handles loading and accessing configuration
    from files, environment variables, and default settings.
    """
    
    def __init__(
        self, 
        config_file: Optional[Union[str, Path]] = None,
        profile: str = "default",
        env_prefix: str = ENV_PREFIX,
        search_paths: Optional[list[Path]] = None
    ):
        """
        Initialize the configuration manager.
        
        Args:
            config_file: Optional path to a configuration file
            profile: Configuration profile to use (for multi-environment setups)
            env_prefix: Prefix for environment variables
            search_paths: Files tried in order when no config_file is given
        """
        self.config_file = config_file
        self.profile = profile
        self.env_prefix = env_prefix
        self.search_paths = DEFAULT_CONFIG_PATHS if search_paths is None else search_paths
        self.config_data: Dict[str, Any] = {}
        
        # Load configuration
        self._load_config()
        
    def _load_config(self) -> None:
        """Load configuration from the first available configuration file."""
        if self.config_file:
            config_path = Path(self.config_file)
            if not config_path.exists():
                logger.warning(f"Specified config file not found: {config_path}")
            else:
                self._load_config_file(config_path)
        else:
            for path in self.search_paths:
                if path.exists():
                    logger.debug(f"Loading configuration from: {path}")
                    self._load_config_file(path)
                    break
    
    def _load_config_file(self, config_path: Path) -> None:
        """
        Load configuration from a file.
        
        Args:
            config_path: Path to configuration file (YAML or JSON)
        """
        try:
            extension = config_path.suffix.lower()
            
            if extension in ['.yml', '.yaml']:
                with open(config_path, 'r', encoding='utf-8') as f:
                    config_data = yaml.safe_load(f)
            elif extension == '.json':
                with open(config_path, 'r', encoding='utf-8') as f:
                    config_data = json.load(f)
            else:
                logger.warning(f"Unsupported config file format: {extension}")
                return
            
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.warning(f"Error loading configuration from {config_path}: {str(e)}")
            return
            
        if not config_data:
            logger.warning(f"Empty configuration file: {config_path}")
            return
            
        if not isinstance(config_data, dict):
            logger.warning(f"Ignoring config file {config_path}: top level must be a mapping")
            return
            
        # Handle profiles
        if 'profiles' in config_data:
            profiles = config_data.get('profiles') or {}
            if self.profile in profiles:
                self.config_data = profiles[self.profile] or {}
                logger.debug(f"Loaded configuration profile: {self.profile}")
            else:
                logger.warning(f"Profile '{self.profile}' not found in config file")
                if 'default' in profiles:
                    self.config_data = profiles['default'] or {}
                    logger.debug("Loaded 'default' profile as fallback")
        else:
            self.config_data = config_data
            
        logger.debug(f"Successfully loaded configuration from {config_path}")
    
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value with fallback to environment and default.
        
        Args:
            key: Configuration key
            default: Default value if not found in config or environment
            
        Returns:
            Configuration value
        """
        # Environment variables win over the config file
        env_key = f"{self.env_prefix}{key.upper()}"
        env_value = os.getenv(env_key)
        if env_value is not None:
            return self._convert_value(env_value)
        
        if key in self.config_data:
            return self.config_data[key]
        
        return default
    
    def _convert_value(self, value: str) -> Any:
        """
        Convert string values from environment variables to appropriate types.
        
        Args:
            value: String value from environment variable
            
        Returns:
            Converted value (bool, int, float, or original string)
        """
        lower_val = value.lower()
        if lower_val in ['true', 'yes']:
            return True
        if lower_val in ['false', 'no']:
            return False
        
        try:
            if '.' in value:
                return float(value)
            else:
                return int(value)
        except ValueError:
            return value


# Create a default config manager instance for package-level access
config_manager = ConfigManager()


def set_config_manager(manager: ConfigManager) -> None:
    """Replace the package-level configuration manager."""
    global config_manager
    config_manager = manager


def get_config(key: str, default: Any = None) -> Any:
    """Get a configuration value."""
    return config_manager.get(key, default)


def get_output_options() -> Dict[str, Any]:
    """
    Get validated output options from configuration.
    
    Returns:
        Dictionary with indent, encoding, download_filename and delay
        
    Raises:
        ConfigurationError: If a configured value is invalid
    """
    from csvToJson.validators import validate_output_options
    
    options = {
        key: get_config(key, default)
        for key, default in DEFAULT_OUTPUT_OPTIONS.items()
    }
    return validate_output_options(options)
