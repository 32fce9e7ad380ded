"""Resource Registry Service - Typed attribute registry for lights, sensors and groups."""

import json
import logging
import os
from contextlib import asynccontextmanager
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import FastAPI, Request
from pydantic import BaseModel

import clock
from clock import format_timestamp
from datatypes import DataType
from descriptors import get_resource_item_descriptor, init_resource_descriptors
from errors import (
    ERR_INVALID_JSON,
    ERR_INVALID_VALUE,
    ERR_MISSING_PARAMETER,
    ERR_RESOURCE_NOT_AVAILABLE,
    error_response,
)
from gateway_logging import configure_logging
from resource_item import ResourceItem
from resources import Resource
from serialization import item_to_json, resource_to_map
from suffixes import (
    ATTR_MANUFACTURER_NAME,
    ATTR_MODEL_ID,
    ATTR_NAME,
    ATTR_SW_VERSION,
    ATTR_UNIQUE_ID,
    CONFIG_LOCAL_TIME,
    R_CONFIG,
    R_GROUPS,
    R_LIGHTS,
    R_SENSORS,
)

# Configuration
HOST = os.getenv("REGISTRY_HOST", "0.0.0.0")
PORT = int(os.getenv("REGISTRY_PORT", "8006"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
GATEWAY_TIMEZONE = os.getenv("GATEWAY_TIMEZONE", "")
GATEWAY_NAME = os.getenv("GATEWAY_NAME", "Resource Registry")
VERSION = "1.0.0"

logger = logging.getLogger(__name__)

# In-memory resource storage, id -> resource
lights: dict[str, Resource] = {}
sensors: dict[str, Resource] = {}
groups: dict[str, Resource] = {}

STORES = {
    R_LIGHTS: lights,
    R_SENSORS: sensors,
    R_GROUPS: groups,
}

# The gateway itself, filled by init_gateway_config()
config = Resource(R_CONFIG)


def init_gateway_config() -> Resource:
    """(Re)build the items of the /config resource."""
    for item in config:
        config.remove_item(item.descriptor.suffix)

    config.add_item(DataType.STRING, ATTR_NAME).set_value(GATEWAY_NAME)
    config.add_item(DataType.STRING, ATTR_SW_VERSION).set_value(VERSION)
    config.add_item(DataType.TIME, CONFIG_LOCAL_TIME).set_value(clock.default_clock.now())
    return config


def gateway_zone(name: str):
    """IANA zone for local time attributes, None for the process zone."""
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown time zone, using process local zone", extra={"fields": {"zone": name}})
        return None


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(LOG_LEVEL)
    clock.default_clock.zone = gateway_zone(GATEWAY_TIMEZONE)
    init_resource_descriptors()
    init_gateway_config()
    yield


app = FastAPI(title="Resource Registry Service", version=VERSION, lifespan=lifespan)


class DeviceResponse(BaseModel):
    uniqueid: str
    sub: list[dict]
    manufacturername: Optional[str] = None
    modelid: Optional[str] = None
    swversion: Optional[str] = None


class AttributeResponse(BaseModel):
    suffix: str
    value: Any
    lastset: Optional[str]
    lastchanged: Optional[str]


def register_resource(resource_id: str, resource: Resource) -> None:
    """File a resource under its category prefix."""
    if resource.prefix not in STORES:
        raise ValueError(f"Resources with prefix '{resource.prefix}' are not stored here")
    STORES[resource.prefix][resource_id] = resource


def device_id_of(uniqueid: str) -> str:
    """Device part of a uniqueid, e.g. the MAC in ``00:21:2e:ff:ff:00:aa:bb-01``."""
    return uniqueid.split("-", 1)[0]


def _store_for(category: str) -> Optional[dict[str, Resource]]:
    return STORES.get("/" + category)


async def _read_json(request: Request) -> tuple[bool, Any]:
    body = await request.body()
    try:
        return True, json.loads(body)
    except (ValueError, UnicodeDecodeError):
        return False, None


@app.get("/health")
async def health():
    return {"status": "healthy", "service": "resource-registry", "version": VERSION}


@app.get("/api/{apikey}/devices")
async def get_all_devices(apikey: str):
    """List the ids of all devices backing lights and sensors."""
    device_ids = {
        device_id_of(r.to_string(ATTR_UNIQUE_ID))
        for store in (lights, sensors)
        for r in store.values()
        if r.to_string(ATTR_UNIQUE_ID)
    }
    return sorted(device_ids)


@app.get("/api/{apikey}/devices/{uniqueid}", response_model=DeviceResponse, response_model_exclude_none=True)
async def get_device(apikey: str, uniqueid: str):
    """Merged view of every light and sensor whose uniqueid starts with ``uniqueid``."""
    sub = []
    manufacturer = modelid = swversion = ""

    for store in (lights, sensors):
        for resource in store.values():
            if not resource.to_string(ATTR_UNIQUE_ID).startswith(uniqueid):
                continue

            # first non-empty value wins
            manufacturer = manufacturer or resource.to_string(ATTR_MANUFACTURER_NAME)
            modelid = modelid or resource.to_string(ATTR_MODEL_ID)
            swversion = swversion or resource.to_string(ATTR_SW_VERSION)
            sub.append(resource_to_map(resource))

    return DeviceResponse(
        uniqueid=uniqueid,
        sub=sub,
        manufacturername=manufacturer or None,
        modelid=modelid or None,
        swversion=swversion or None,
    )


@app.put("/api/{apikey}/devices/{uniqueid}/installcode")
async def put_device_install_code(apikey: str, uniqueid: str, request: Request):
    """Accept a Zigbee 3.0 install code for a device to join securely."""
    address = f"/devices/{uniqueid}/installcode"

    ok, body = await _read_json(request)
    if not ok or not isinstance(body, dict) or not body:
        return error_response(400, ERR_INVALID_JSON, address, "body contains invalid JSON")

    if "installcode" not in body:
        return error_response(400, ERR_MISSING_PARAMETER, address, "missing parameters in body")

    value = body["installcode"]
    install_code = value.strip() if isinstance(value, str) else json.dumps(value)
    if not isinstance(value, str) or not install_code:
        return error_response(
            400, ERR_INVALID_VALUE, address, f"invalid value, {install_code}, for parameter, installcode"
        )

    # Commissioning with the code happens in the network stack
    logger.info("Install code accepted", extra={"fields": {"uniqueid": uniqueid}})
    return [{"success": {"installcode": install_code}}]


@app.get("/api/{apikey}/config")
async def get_config(apikey: str):
    """The gateway's own configuration resource."""
    return resource_to_map(config)


@app.get("/api/{apikey}/config/{suffix:path}", response_model=AttributeResponse)
async def get_config_attribute(apikey: str, suffix: str):
    address = f"/config/{suffix}"
    item = _public_item(config, address)
    if item is None:
        return error_response(404, ERR_RESOURCE_NOT_AVAILABLE, address, f"resource, {address}, not available")
    return _attribute_response(item)


@app.put("/api/{apikey}/config/{suffix:path}")
async def put_config_attribute(apikey: str, suffix: str, request: Request):
    address = f"/config/{suffix}"
    item = _public_item(config, address)
    if item is None:
        return error_response(404, ERR_RESOURCE_NOT_AVAILABLE, address, f"resource, {address}, not available")
    return await _write_attribute(item, request, address, "/config")


@app.get("/api/{apikey}/{category}")
async def get_all_resources(apikey: str, category: str):
    store = _store_for(category)
    if store is None:
        return error_response(404, ERR_RESOURCE_NOT_AVAILABLE, f"/{category}", f"resource, /{category}, not available")
    return {resource_id: resource_to_map(resource) for resource_id, resource in store.items()}


@app.get("/api/{apikey}/{category}/{resource_id}")
async def get_resource(apikey: str, category: str, resource_id: str):
    store = _store_for(category)
    address = f"/{category}/{resource_id}"
    if store is None or resource_id not in store:
        return error_response(404, ERR_RESOURCE_NOT_AVAILABLE, address, f"resource, {address}, not available")
    return resource_to_map(store[resource_id])


def _public_item(resource: Resource, path: str) -> Optional[ResourceItem]:
    """Resolve the attribute at the tail of ``path``, hidden items excluded."""
    descr = get_resource_item_descriptor(path)
    if descr is None:
        return None
    item = resource.item(descr.suffix)
    if item is None or not item.is_public:
        return None
    return item


def _resolve_item(category: str, resource_id: str, suffix: str) -> Optional[ResourceItem]:
    store = _store_for(category)
    if store is None or resource_id not in store:
        return None
    return _public_item(store[resource_id], f"/{category}/{resource_id}/{suffix}")


def _attribute_response(item: ResourceItem) -> AttributeResponse:
    return AttributeResponse(
        suffix=item.descriptor.suffix,
        value=item_to_json(item),
        lastset=format_timestamp(item.last_set),
        lastchanged=format_timestamp(item.last_changed),
    )


async def _write_attribute(item: ResourceItem, request: Request, address: str, resource_path: str):
    ok, value = await _read_json(request)
    if not ok:
        return error_response(400, ERR_INVALID_JSON, address, "body contains invalid JSON")

    if not item.set_value(value):
        return error_response(
            400,
            ERR_INVALID_VALUE,
            address,
            f"invalid value, {json.dumps(value)}, for parameter, {item.descriptor.suffix}",
        )

    return [{"success": {f"{resource_path}/{item.descriptor.suffix}": item_to_json(item)}}]


@app.get("/api/{apikey}/{category}/{resource_id}/{suffix:path}", response_model=AttributeResponse)
async def get_attribute(apikey: str, category: str, resource_id: str, suffix: str):
    """Read one attribute, e.g. ``/lights/1/state/on``."""
    item = _resolve_item(category, resource_id, suffix)
    if item is None:
        address = f"/{category}/{resource_id}/{suffix}"
        return error_response(404, ERR_RESOURCE_NOT_AVAILABLE, address, f"resource, {address}, not available")
    return _attribute_response(item)


@app.put("/api/{apikey}/{category}/{resource_id}/{suffix:path}")
async def put_attribute(apikey: str, category: str, resource_id: str, suffix: str, request: Request):
    """Write one attribute; the body is the bare JSON value, ``null`` clears it."""
    address = f"/{category}/{resource_id}/{suffix}"
    item = _resolve_item(category, resource_id, suffix)
    if item is None:
        return error_response(404, ERR_RESOURCE_NOT_AVAILABLE, address, f"resource, {address}, not available")
    return await _write_attribute(item, request, address, f"/{category}/{resource_id}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)
