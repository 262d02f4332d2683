import pytest
from disk import new_disk_driver
from models import PodDisk
from models import VolumeMount
from models import VolumeMountDisk


@pytest.fixture
def driver():
    return new_disk_driver()


@pytest.fixture
def pod_disks():
    return [
        PodDisk(id="d1", name="alpha"),
        PodDisk(id="d2", name="beta", template_id="tpl1"),
        PodDisk(id="d3", name="gamma"),
    ]


def make_mount(**disk):
    return VolumeMount(mount_path="/data", disk=VolumeMountDisk(**disk))
