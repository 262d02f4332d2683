import os

logging_config_path = os.environ.get("LOGGING_CONFIG_FILE", "/mnt/config/logging.json")
log_dir = os.environ.get("LOG_DIR", "")
log_level = os.environ.get("LOG_LEVEL", "DEBUG")
