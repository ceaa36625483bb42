"""
context.py -- Provide application context for segchain
"""
import threading
import logging
from typing import Optional

from segchain.config import ConfigManager
from segchain.core.logging_config import LoggingManager


class ApplicationContext:
    """Application context holding the active configuration"""

    _instance = None
    _lock = threading.Lock()

    def __new__(cls, config_path: Optional[str] = None):
        """Singleton instance

        Args:
            config_path: Path to configuration file

        Returns:
            ApplicationContext instance
        """
        with cls._lock:
            if cls._instance is None:
                cls._instance = super(ApplicationContext, cls).__new__(cls)
                cls._instance._initialized = False
            return cls._instance

    def __init__(self, config_path: Optional[str] = None):
        """Initialize application context

        Args:
            config_path: Path to configuration file
        """
        with self._lock:
            if not self._initialized:
                self.logger = logging.getLogger("segchain.context")
                self.config_manager = ConfigManager(config_path)
                self.logger.debug("Configuration initialized")
                self._initialized = True
            elif config_path is not None and config_path != self.config_manager.config_path:
                self.logger.info(f"Re-initializing context with new config: {config_path}")
                self.config_manager = ConfigManager(config_path)

    @property
    def config(self) -> ConfigManager:
        """Access the configuration manager"""
        return self.config_manager

    def configure_logging(self, verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
        """Set up logging from the active configuration"""
        return LoggingManager.configure(
            verbose=verbose,
            log_file=log_file,
            component="segchain",
            config=self.config_manager.config
        )

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton so the next access reloads configuration"""
        with cls._lock:
            cls._instance = None
