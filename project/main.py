from typing import List

from disk import new_disk_driver
from errors import VolumeMountError
from fastapi import FastAPI
from fastapi import Response
from fastapi.responses import JSONResponse
from log import getLogger
from models import DiskOverlay
from models import PodDisk
from models import ServerCreateInput
from models import VolumeMount
from overlay import default_overlay_registry
from pydantic import BaseModel


class ValidateRequest(BaseModel):
    volume_mount: VolumeMount
    disks: List[PodDisk] = []


class ValidatePodCreateRequest(BaseModel):
    volume_mount: VolumeMount
    input: ServerCreateInput


overlay_registry = default_overlay_registry()
drivers = {d.get_type(): d for d in [new_disk_driver(overlay_registry)]}

app = FastAPI()

log = getLogger()


def error_response(e: VolumeMountError):
    return JSONResponse(
        status_code=e.status_code, content={"detail": str(e), "kind": e.kind}
    )


def not_found(mount_type: str):
    log.debug(f"Volume mount type {mount_type} not found")
    return JSONResponse(
        status_code=404, content={"detail": f"Volume mount type {mount_type} not found"}
    )


@app.post("/overlay/validate")
async def validate_overlay(item: DiskOverlay):
    try:
        overlay_registry.validate_overlay(item)
    except VolumeMountError as e:
        log.info(f"Validate overlay ... failed: {e}")
        return error_response(e)
    return Response(status_code=204)


@app.post("/{mount_type}/validate")
async def validate(mount_type: str, item: ValidateRequest):
    driver = drivers.get(mount_type, None)
    if driver is None:
        return not_found(mount_type)
    log.info(f"Validate {mount_type} volume mount ...")
    try:
        volume_mount = driver.validate_create_data(
            item.volume_mount, lambda: item.disks
        )
    except VolumeMountError as e:
        log.info(f"Validate {mount_type} volume mount ... failed: {e}")
        return error_response(e)
    log.info(f"Validate {mount_type} volume mount ... successful")
    return JSONResponse(content=volume_mount.model_dump())


@app.post("/{mount_type}/validate-pod-create")
async def validate_pod_create(mount_type: str, item: ValidatePodCreateRequest):
    driver = drivers.get(mount_type, None)
    if driver is None:
        return not_found(mount_type)
    log.info(f"Validate {mount_type} volume mount for pod creation ...")
    try:
        driver.validate_pod_create_data(item.volume_mount, item.input)
    except VolumeMountError as e:
        log.info(f"Validate {mount_type} volume mount for pod creation ... failed: {e}")
        return error_response(e)
    log.info(f"Validate {mount_type} volume mount for pod creation ... successful")
    return Response(status_code=204)
