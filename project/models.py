from typing import List
from typing import Optional

from errors import InvalidValueError
from pydantic import BaseModel

OVERLAY_TYPE_DIRECTORY = "directory"
OVERLAY_TYPES = (OVERLAY_TYPE_DIRECTORY,)

VOLUME_MOUNT_TYPE_DISK = "disk"


class DiskOverlay(BaseModel):
    type: str
    lower_dir: List[str] = []

    def get_type(self):
        return self.type

    def is_valid(self):
        if self.type not in OVERLAY_TYPES:
            raise InvalidValueError(f"unsupported overlay type {self.type!r}")


class VolumeMountDisk(BaseModel):
    index: Optional[int] = None
    id: str = ""
    sub_directory: str = ""
    overlay: Optional[DiskOverlay] = None


class VolumeMount(BaseModel):
    type: str = VOLUME_MOUNT_TYPE_DISK
    mount_path: str = ""
    read_only: bool = False
    disk: Optional[VolumeMountDisk] = None


class PodDisk(BaseModel):
    id: str
    name: str = ""
    template_id: str = ""
    image_id: str = ""

    def source(self):
        return disk_source(self)


class PodCreateDisk(BaseModel):
    image_id: str = ""
    size: int = 0


class ServerCreateInput(BaseModel):
    disks: List[PodCreateDisk] = []


# Disk list entries come from outside and only need these attributes
def disk_source(disk):
    template_id = getattr(disk, "template_id", "")
    if template_id:
        return "template_id", template_id
    image_id = getattr(disk, "image_id", "")
    if image_id:
        return "image_id", image_id
    return None
