"""Print every property of a Samsung air conditioner.

Usage:
    python examples/show_state.py --config samsung_ac.json
    python examples/show_state.py --host 192.168.1.60 --token ... --cert ac14k_m.pem
"""

import asyncio
import argparse
import logging

from asyncsamsungac import AirConditioner, AirConditionerConfig


def build_config(args) -> AirConditionerConfig:
    if args.config:
        return AirConditionerConfig.from_file(args.config)
    return AirConditionerConfig(
        host=args.host,
        token=args.token,
        cert_path=args.cert,
        device_index=args.device_index,
    )


async def main():
    parser = argparse.ArgumentParser(description="Show air conditioner state")
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument("--host")
    parser.add_argument("--token")
    parser.add_argument("--cert")
    parser.add_argument("--device-index", type=int, default=0)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    if not args.config and not (args.host and args.token and args.cert):
        parser.error("either --config or --host, --token and --cert are required")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    async with AirConditioner.from_config(build_config(args)) as ac:
        values = await ac.get_all()
        for name, value in values.items():
            print(f"{name:30} {value!s}")


if __name__ == "__main__":
    asyncio.run(main())
