#!/usr/bin/env python3
"""Helper script to check and create the .env file for Google Maps configuration."""

from pathlib import Path
import os
import sys

TEMPLATE = """# Google Maps (Required for place search and route calculation)
# Enable Places, Geocoding and Distance Matrix APIs for this key.
PATHFINDER_GOOGLE_MAPS_API_KEY=your-api-key-here

# Units for leg distances: mi or km
PATHFINDER_DISTANCE_UNIT=mi

# Route evaluation
# PATHFINDER_MAX_PARALLEL_REQUESTS=1
# PATHFINDER_MAX_ROUTE_COMBINATIONS=10000

# API Configuration
PATHFINDER_API_PREFIX=/api
# PATHFINDER_FRONTEND_ALLOWED_ORIGINS - JSON array or comma-separated list
"""


def _mask(value: str) -> str:
    if len(value) > 12:
        return value[:6] + "..." + value[-4:]
    return "***"


def main():
    project_root = Path(__file__).parent
    env_file = project_root / ".env"

    print("=" * 60)
    print("PathFinder Environment Checker")
    print("=" * 60)
    print()

    if not env_file.exists():
        print(f"❌ .env file NOT found at: {env_file}")
        print("Creating template .env file...")
        with open(env_file, "w", encoding="utf-8") as f:
            f.write(TEMPLATE)
        print(f"✅ Created .env file at: {env_file}")
        print("⚠️  Please edit .env and add your Google Maps API key!")
        return 1

    print(f"✅ Found .env file at: {env_file}")
    print()

    env_key = os.getenv("PATHFINDER_GOOGLE_MAPS_API_KEY")
    if env_key:
        print(f"✅ PATHFINDER_GOOGLE_MAPS_API_KEY (from environment): {_mask(env_key)}")
    else:
        print("ℹ️  PATHFINDER_GOOGLE_MAPS_API_KEY not set in environment, relying on .env")
    print()

    print("Testing config loading...")
    try:
        sys.path.insert(0, str(project_root / "src"))
        from pathfinder.config import settings
    except Exception as e:
        print(f"❌ Error loading config: {e}")
        print("Make sure you're running this from the project root directory")
        return 1

    if settings.google_maps_api_key:
        print(f"✅ Config loaded GOOGLE_MAPS_API_KEY: {_mask(settings.google_maps_api_key)}")
        print(f"✅ Distance unit: {settings.distance_unit}")
        print("=" * 60)
        print("✅ SUCCESS: Google Maps is configured!")
        print("=" * 60)
        return 0

    print("=" * 60)
    print("❌ ERROR: Google Maps is NOT configured")
    print("=" * 60)
    print("1. Make sure variables start with the PATHFINDER_ prefix")
    print("2. Make sure there are no spaces around = sign")
    print("3. Restart the server after editing .env")
    return 1


if __name__ == "__main__":
    sys.exit(main())
