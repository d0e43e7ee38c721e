#!/usr/bin/env python3
"""Manual check that the Google Maps APIs used by the planner respond."""

import sys
from pathlib import Path

project_root = Path(__file__).parent
sys.path.insert(0, str(project_root / "src"))

from pathfinder.config import settings
from pathfinder.services.routing.maps_client import GoogleMapsClient, check_health


def main(origin: str = "Union Square, San Francisco", destination: str = "Ferry Building, San Francisco") -> int:
    print("=" * 60)
    print("Google Maps Connection Test")
    print("=" * 60)
    print()

    print("1. Checking configuration...")
    if not settings.google_maps_api_key:
        print("   [ERROR] PATHFINDER_GOOGLE_MAPS_API_KEY is not configured")
        return 1
    print(f"   [OK] Base URL: {settings.google_maps_base_url}")
    print(f"   [OK] Distance unit: {settings.distance_unit}")
    print()

    print("2. Testing geocoding health check...")
    if not check_health():
        print("   [ERROR] Google Maps rejected the request or is unreachable")
        return 1
    print("   [OK] Google Maps accepted the API key")
    print()

    print("3. Testing place search and leg cost...")
    try:
        client = GoogleMapsClient()
        start = client.search_place(origin)
        end = client.search_place(destination)
        cost = client.resolve_leg_cost(start, end)
        print(f"   [OK] {start} -> {end}")
        print(f"   [OK] {cost.distance} {settings.distance_unit}, {cost.duration} minutes")
    except Exception as e:
        print(f"   [ERROR] {e}")
        return 1
    print()

    print("=" * 60)
    print("[SUCCESS] Google Maps is connected and working!")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:3]))
