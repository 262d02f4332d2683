import json
import logging
import logging.handlers
import os
import socket
import sys
from copy import deepcopy

from jsonformatter import JsonFormatter
from values import log_dir
from values import log_level
from values import logging_config_path

logged_logger_name = "VolumeMount"
logger = None


class ExtraFormatter(logging.Formatter):
    """Appends the record's extra fields as ' --- key=value'."""

    reserved = set(logging.LogRecord(None, None, None, None, None, None, None).__dict__)
    reserved.update({"asctime", "message"})

    def format(self, record):
        extras = [
            f" --- {k}={v}"
            for k, v in record.__dict__.items()
            if k not in self.reserved
        ]
        return super().format(record) + "".join(extras)


def get_level(level):
    if isinstance(level, int):
        return level
    name = level.upper()
    if name in logging.getLevelNamesMapping():
        return logging.getLevelNamesMapping()[name]
    if name.startswith("DEACTIVATE"):
        return 99
    try:
        return int(level)
    except ValueError:
        pass
    raise NotImplementedError(f"{level} as level not supported.")


supported_handler_classes = {
    "stream": logging.StreamHandler,
    "file": logging.handlers.TimedRotatingFileHandler,
    "smtp": logging.handlers.SMTPHandler,
    "syslog": logging.handlers.SysLogHandler,
}

hostname = os.environ.get("HOSTNAME", "unknown")
supported_formatter_classes = {
    "json": JsonFormatter,
    "simple": ExtraFormatter,
    "simple_user": ExtraFormatter,
}
json_fmt = {
    "asctime": "asctime",
    "levelno": "levelno",
    "levelname": "levelname",
    "logger": logged_logger_name,
    "hostname": hostname,
    "file": "pathname",
    "line": "lineno",
    "function": "funcName",
    "Message": "message",
}
simple_fmt = f"%(asctime)s logger={logged_logger_name} hostname={hostname} levelname=%(levelname)s file=%(pathname)s line=%(lineno)d function=%(funcName)s : %(message)s"
simple_user = "%(asctime)s levelname=%(levelname)s: %(message)s"
supported_formatter_kwargs = {
    "json": {"fmt": json_fmt, "mix_extra": True},
    "simple": {"fmt": simple_fmt},
    "simple_user": {"fmt": simple_user},
}

# "ext://" references allowed in the logging config file
external_values = {
    "ext://sys.stdout": sys.stdout,
    "ext://sys.stderr": sys.stderr,
    "ext://socket.SOCK_STREAM": socket.SOCK_STREAM,
    "ext://socket.SOCK_DGRAM": socket.SOCK_DGRAM,
}


def default_logging_config():
    return {
        "stream": {
            "enabled": True,
            "level": log_level,
            "formatter": "simple",
            "stream": "ext://sys.stdout",
        },
        "file": {
            "enabled": bool(log_dir),
            "level": "INFO",
            "formatter": "json",
            "filename": os.path.join(log_dir, "volume-mount.log"),
            "when": "midnight",
            "backupCount": 7,
        },
    }


def load_logging_config(path=logging_config_path):
    logging_config = default_logging_config()
    if path and os.path.exists(path):
        with open(path, "r") as f:
            logging_config.update(json.load(f))
    return logging_config


def getLogger():
    global logger
    if not logger:
        logger = createLogger()
    return logger


def create_handler(handler_name, handler_config):
    configuration = {
        key: external_values.get(value, value) if isinstance(value, str) else value
        for key, value in deepcopy(handler_config).items()
        if value is not None
    }
    configuration.pop("enabled", None)
    formatter_name = configuration.pop("formatter", "simple")
    level = get_level(configuration.pop("level", logging.DEBUG))

    handler = supported_handler_classes[handler_name](**configuration)
    handler.name = handler_name
    handler.setLevel(level)
    handler.setFormatter(
        supported_formatter_classes[formatter_name](
            **supported_formatter_kwargs[formatter_name]
        )
    )
    return handler


def createLogger(logging_config=None):
    if logging_config is None:
        logging_config = load_logging_config()
    logger = logging.getLogger(logged_logger_name)
    logger.setLevel(logging.DEBUG)

    for handler_name, handler_config in logging_config.items():
        # Handlers with a changed config are recreated, disabled ones removed
        logger.handlers = [x for x in logger.handlers if x.name != handler_name]
        if not handler_config.get("enabled", False):
            continue
        logger.addHandler(create_handler(handler_name, handler_config))
        logger.debug(
            f"Logging handler added ({handler_name})",
            extra={"handler_level": handler_config.get("level")},
        )
    return logger
