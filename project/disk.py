from errors import InvalidValueError
from errors import MissingFieldError
from errors import NotFoundError
from errors import VolumeMountError
from errors import wrap_error
from log import getLogger
from models import disk_source
from models import ServerCreateInput
from models import VOLUME_MOUNT_TYPE_DISK
from models import VolumeMount
from overlay import default_overlay_registry
from overlay import OverlayRegistry


class DiskDriver:
    """Validates volume mounts backed by one of the pod's disks."""

    def __init__(self, overlay_registry: OverlayRegistry):
        self.overlay_registry = overlay_registry

    def get_type(self):
        return VOLUME_MOUNT_TYPE_DISK

    def _validate_create_data(self, item: VolumeMount):
        disk = item.disk
        if disk is None:
            raise MissingFieldError("disk is required")
        if disk.index is None and not disk.id:
            raise MissingFieldError("one of disk.index or disk.id is required")
        if disk.index is not None and disk.index < 0:
            raise InvalidValueError(f"disk.index {disk.index} is less than 0")
        return item

    def _check_sub_directory(self, item: VolumeMount, pod_disk):
        source = disk_source(pod_disk)
        if source and not item.disk.sub_directory:
            key, value = source
            raise MissingFieldError(
                f"disk.sub_directory is required when disk has {key} {value}"
            )

    def validate_create_data(self, item: VolumeMount, get_disks):
        """Resolve the disk of a mount attached to an existing pod.

        get_disks returns the pod's disks in order. The returned mount
        refers to the disk by its id only; item itself is left untouched.
        """
        log = getLogger()
        self._validate_create_data(item)
        try:
            disks = list(get_disks())
        except Exception as e:
            raise wrap_error(e, "get pod disks") from e

        item = item.model_copy(deep=True)
        disk = item.disk
        try:
            if disk.index is not None:
                if disk.index >= len(disks):
                    raise InvalidValueError(
                        f"disk.index {disk.index} is larger than disk count {len(disks)}"
                    )
                pod_disk = disks[disk.index]
                disk.id = pod_disk.id
                disk.index = None
            else:
                pod_disk = None
                for d in disks:
                    if d.id == disk.id or getattr(d, "name", "") == disk.id:
                        pod_disk = d
                        break
                if pod_disk is None:
                    raise NotFoundError(f"pod disk {disk.id} not found")
                disk.id = pod_disk.id
            self._check_sub_directory(item, pod_disk)
        except VolumeMountError as e:
            log.info(f"Validate disk volume mount ... failed: {e}")
            raise
        log.debug(f"Resolved volume mount disk to {disk.id}")

        try:
            self.overlay_registry.validate_overlay(disk.overlay)
        except VolumeMountError as e:
            log.info(f"Validate disk overlay ... failed: {e}")
            raise e.wrap("validate overlay") from e
        return item

    def validate_pod_create_data(self, item: VolumeMount, input: ServerCreateInput):
        self._validate_create_data(item)
        disk = item.disk
        if disk.id:
            raise InvalidValueError(f"can't specify disk.id {disk.id} when creating pod")
        if disk.index is None:
            raise MissingFieldError("disk.index is required")
        disks = input.disks
        if disk.index < 0:
            raise InvalidValueError(f"disk.index {disk.index} is less than 0")
        if disk.index >= len(disks):
            raise InvalidValueError(
                f"disk.index {disk.index} is larger than disk count {len(disks)}"
            )
        input_disk = disks[disk.index]
        if input_disk.image_id and not disk.sub_directory:
            raise MissingFieldError(
                f"disk.sub_directory is required when disk has image_id {input_disk.image_id}"
            )
        # Overlays are only checked once the pod's disks exist


def new_disk_driver(overlay_registry: OverlayRegistry = None):
    if overlay_registry is None:
        overlay_registry = default_overlay_registry()
    return DiskDriver(overlay_registry)
