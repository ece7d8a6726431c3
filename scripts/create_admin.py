from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.worktrack.worktrack.container import build_container
from src.worktrack.worktrack.main import resolve_jwt_secret


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        jwt_secret=resolve_jwt_secret(settings),
        hash_method=settings.PASSWORD_HASH_METHOD,
    )

    created = container.user_service.ensure_admin(
        email=settings.ADMIN_EMAIL,
        password=settings.ADMIN_PASSWORD,
        name=settings.ADMIN_NAME,
    )
    state = "created" if created else "already present"
    print(f"OK: admin account {settings.ADMIN_EMAIL} {state}")


if __name__ == "__main__":
    main()
