"""
Provision a device for the marketplace.

Creates the linked public and private records a device needs before it can
register, and prints the id the device must be configured with.
"""
import argparse
import asyncio
import logging

from lease_server.core.config import get_settings
from lease_server.core.logging import configure_logging
from lease_server.infrastructure.database import get_session, init_db
from lease_server.modules.devices import DeviceService

logger = logging.getLogger(__name__)


async def provision(device_name: str | None, device_id: str | None) -> None:
    await init_db()

    async for db in get_session():
        service = DeviceService.with_session(db)
        existing = await service.get_device(device_id) if device_id else None
        if existing is not None:
            logger.warning("Device %s already exists, nothing to do", existing.id)
            return

        device = await service.provision_device(device_id=device_id, device_name=device_name)

        print("=" * 50)
        print("Device provisioned")
        print("=" * 50)
        print(f"id:   {device.id}")
        print(f"name: {device.device_name or '-'}")
        print("=" * 50)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--name", help="human readable device name")
    parser.add_argument("--id", dest="device_id", help="use a fixed device id instead of a generated one")
    args = parser.parse_args()

    configure_logging(get_settings())
    asyncio.run(provision(args.name, args.device_id))


if __name__ == "__main__":
    main()
