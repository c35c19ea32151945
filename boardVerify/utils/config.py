"""
Copyright (C) 2025 boardVerify Contributors

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""

# Imports
import yaml
from typing import Dict, Any, Optional

from .logging import error


# Default values of every configuration key
DEFAULT_CONFIG: Dict[str, Any] = {
    "debug": False,
    "delimiter": ",",
    "show_board": False,
    "plot": None,
}


class VerifyConfig:
    """
    Configuration class for game verification that loads from a YAML file and
    provides property-based access to configuration values.

    Keys missing from the file take their value from DEFAULT_CONFIG.
    """

    def __init__(self, config_dict=None):
        """
        Initialize the verification configuration with a dictionary.

        Args:
            config_dict (dict, optional): Dictionary containing configuration values.
                                         If None, only the defaults are used.
        """
        config = dict(DEFAULT_CONFIG)
        config.update(config_dict or {})
        self._config = config

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the configuration to a dictionary.
        """
        return dict(self._config)
    # end def to_dict

    @classmethod
    def from_yaml(cls, config_path):
        """
        Load configuration from a YAML file.

        Args:
            config_path (str): Path to the YAML configuration file

        Returns:
            VerifyConfig: Configuration object
        """
        try:
            with open(config_path, 'r') as f:
                config_dict = yaml.safe_load(f)
            # end with
        except FileNotFoundError:
            error(f"Configuration file {config_path} not found. Using default configuration.")
            return cls({})
        except yaml.YAMLError as e:
            error(f"Error parsing YAML configuration file: {e}")
            return cls({})
        # end try

        if config_dict is not None and not isinstance(config_dict, dict):
            error(f"Configuration file {config_path} must contain a mapping. Using default configuration.")
            return cls({})
        # end if

        return cls(config_dict)
    # end def from_yaml

    def override(self, **values) -> "VerifyConfig":
        """
        Overwrite configuration values, ignoring the ones set to None.

        Args:
            **values: New values, typically command line flags

        Returns:
            VerifyConfig: This configuration
        """
        for name, value in values.items():
            if value is not None:
                self._config[name] = value
            # end if
        # end for
        return self
    # end def override

    def __getattr__(self, name):
        """
        Get a configuration value by attribute name.

        Raises:
            AttributeError: If the property doesn't exist in the configuration
        """
        if name in self._config:
            return self._config[name]
        raise AttributeError(
            f"'{self.__class__.__name__}' object has no attribute "
            f"'{name}' (available attributes: {self._config.keys()})"
        )

    def __getitem__(self, key):
        if key in self._config:
            return self._config[key]
        # end if
        raise KeyError(key)

    def __setattr__(self, name, value):
        if name == '_config':
            super().__setattr__(name, value)
        else:
            self._config[name] = value

    def __setitem__(self, key, value):
        self._config[key] = value

    def get(self, name, default=None):
        """
        Get a configuration value with a default fallback.

        Args:
            name (str): Name of the configuration property
            default (Any, optional): Default value if property doesn't exist

        Returns:
            Any: Value of the configuration property or default
        """
        return self._config.get(name, default)

    def __contains__(self, name):
        return name in self._config
    # end def __contains__

# end class VerifyConfig


def load_config(config_path: Optional[str] = None) -> VerifyConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path (Optional[str]): Path to the YAML configuration file, None for defaults

    Returns:
        VerifyConfig: Configuration object
    """
    if config_path is None:
        return VerifyConfig()
    # end if
    return VerifyConfig.from_yaml(config_path)
# end def load_config
