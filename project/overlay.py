from types import MappingProxyType

from errors import InternalError
from errors import InvalidValueError
from errors import MissingFieldError
from errors import VolumeMountError
from log import getLogger
from models import DiskOverlay
from models import OVERLAY_TYPE_DIRECTORY


class DiskOverlayDirectory:
    def validate_create_data(self, item: DiskOverlay):
        if not item.lower_dir:
            raise MissingFieldError("lower_dir is required")
        for idx, lower_dir in enumerate(item.lower_dir):
            if not lower_dir:
                raise MissingFieldError(f"lower_dir[{idx}] is empty")
            if lower_dir == "/":
                raise InvalidValueError(f"lower_dir[{idx}]: can't use '/' as lower_dir")


class OverlayRegistry:
    """Read-only mapping from overlay type to its validator.

    Any mount driver sharing the overlay concept may call validate_overlay.
    """

    def __init__(self, drivers):
        self._drivers = MappingProxyType(dict(drivers))

    def types(self):
        return tuple(self._drivers.keys())

    def lookup(self, type_: str):
        return self._drivers.get(type_, None)

    def validate_overlay(self, item: DiskOverlay):
        if item is None:
            return
        log = getLogger()
        try:
            item.is_valid()
        except VolumeMountError as e:
            raise InvalidValueError(f"invalid overlay input: {e}") from e
        driver = self.lookup(item.get_type())
        if driver is None:
            log.error(
                f"No validator registered for overlay type {item.get_type()}",
                extra={"registered": list(self.types())},
            )
            raise InternalError(f"overlay type {item.get_type()} is not registered")
        log.debug(f"Validate overlay {item.get_type()} ...")
        try:
            driver.validate_create_data(item)
        except VolumeMountError as e:
            raise e.wrap(f"validate overlay {item.get_type()}") from e
        log.debug(f"Validate overlay {item.get_type()} ... done")


_default_registry = None


def default_overlay_registry():
    global _default_registry
    if _default_registry is None:
        _default_registry = OverlayRegistry(
            {OVERLAY_TYPE_DIRECTORY: DiskOverlayDirectory()}
        )
    return _default_registry
