"""
Example usage of the Brand Balance Engine

Analyzes a logo against its brand name and writes a sticker version next to it.

    python example_usage.py path/to/logo.png "Brand Name" "Inter Bold"
"""

import asyncio
import base64
import json
import sys
from pathlib import Path

from loguru import logger

from modules.balance import analyze_logo_wordmark_balance
from modules.sticker import create_sticker_effect
from utils.exceptions import LoadError
from utils.log_utils import setup_logging


async def run(logo_path: str, brand_name: str, font: str) -> None:
    try:
        analysis = await analyze_logo_wordmark_balance(logo_path, brand_name, font)
    except LoadError as e:
        logger.error(f"Could not analyze logo, keep default display settings: {e}")
        return

    print(json.dumps(analysis.to_dict(), indent=2))

    sticker = await create_sticker_effect(logo_path)
    if sticker == logo_path:
        logger.warning("Sticker effect unavailable for this image")
        return

    output = Path(logo_path).with_name(Path(logo_path).stem + "_sticker.png")
    output.write_bytes(base64.b64decode(sticker.partition(",")[2]))
    print(f"Sticker saved: {output}")


if __name__ == "__main__":
    if len(sys.argv) != 4:
        print(__doc__)
        sys.exit(1)

    setup_logging()
    asyncio.run(run(*sys.argv[1:]))
