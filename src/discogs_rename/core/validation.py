"""
Configuration validation utilities.
"""

import importlib
from typing import List, Tuple
from .config import (
    DISCOGS_CONFIG,
    API_LIMITS,
    LOGGING_CONFIG,
)
from .exceptions import ConfigurationError


def check_dependencies() -> Tuple[bool, List[str]]:
    """
    Check if all required dependencies are installed.
    
    Returns:
        Tuple of (all_installed, list_of_missing_dependencies)
    """
    required_packages = {
        "requests": "requests",
        "rich": "rich",
        "unidecode": "Unidecode",
        "roman": "roman",
    }
    
    missing = []
    for module_name, package_name in required_packages.items():
        try:
            importlib.import_module(module_name)
        except ImportError:
            missing.append(package_name)
    
    return len(missing) == 0, missing


def validate_configuration() -> Tuple[bool, List[str]]:
    """
    Validate application configuration.
    
    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []
    
    deps_ok, missing_deps = check_dependencies()
    if not deps_ok:
        errors.append(
            f"Missing required dependencies: {', '.join(missing_deps)}. "
            f"Please install them with: pip install -e ."
        )
    
    if not DISCOGS_CONFIG["BASE_URL"].startswith(("http://", "https://")):
        errors.append("Discogs BASE_URL must be an http(s) URL")
    
    if DISCOGS_CONFIG["REQUEST_DELAY"] < 0:
        errors.append("Discogs REQUEST_DELAY must be >= 0")
    
    if DISCOGS_CONFIG["TIMEOUT"] < 1:
        errors.append("Discogs TIMEOUT must be >= 1")
    
    if API_LIMITS["MAX_RETRIES"] < 0:
        errors.append("MAX_RETRIES must be >= 0")
    
    if API_LIMITS["BACKOFF_FACTOR"] <= 0:
        errors.append("BACKOFF_FACTOR must be > 0")
    
    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if LOGGING_CONFIG["LEVEL"] not in valid_log_levels:
        errors.append(f"LOG_LEVEL must be one of: {', '.join(valid_log_levels)}")
    
    is_valid = len(errors) == 0
    return is_valid, errors


def validate_and_raise():
    """
    Validate configuration and raise ConfigurationError if invalid.
    """
    is_valid, errors = validate_configuration()
    if not is_valid:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)
