from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.attendease.attendease.core.enums import Role
from src.attendease.attendease.geofence.model import NewGeoFence
from src.attendease.attendease.main import bootstrap

DEMO_FENCES = [
    NewGeoFence(name="Main Office", latitude=12.9716, longitude=77.5946, radius_m=500),
    NewGeoFence(name="Branch Office", latitude=12.9352, longitude=77.6245, radius_m=300),
]


def main() -> None:
    container = bootstrap()

    existing = {f.name for f in container.geofence_service.list_fences(current_role=Role.SUPER_ADMIN)}
    created = 0
    for fence in DEMO_FENCES:
        if fence.name in existing:
            continue
        container.geofence_service.create_fence(current_role=Role.SUPER_ADMIN, data=fence)
        created += 1

    print(f"OK: Seeded {created} geofence(s)")


if __name__ == "__main__":
    main()
