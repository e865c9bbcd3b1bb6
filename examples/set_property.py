"""Set one property of a Samsung air conditioner.

Usage:
    python examples/set_property.py --config samsung_ac.json active 1
    python examples/set_property.py --config samsung_ac.json target_temperature 24
"""

import asyncio
import argparse
import logging
import sys

from asyncsamsungac import AirConditioner, AirConditionerConfig, SamsungACException


async def main():
    parser = argparse.ArgumentParser(description="Set an air conditioner property")
    parser.add_argument("--config", required=True, help="JSON configuration file")
    parser.add_argument("property")
    parser.add_argument("value", type=int)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    config = AirConditionerConfig.from_file(args.config)
    async with AirConditioner.from_config(config) as ac:
        try:
            await ac.set(args.property, args.value)
        except (SamsungACException, ValueError) as exc:
            print(f"Failed: {exc}", file=sys.stderr)
            return 1
        print(f"{args.property} = {await ac.get(args.property)}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
