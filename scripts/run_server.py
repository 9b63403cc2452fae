from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.class_attendance.class_attendance.main import create_app


def main() -> None:
    # create_app loads .env before resolving settings; HOST/PORT come back on app.config
    app = create_app()
    app.run(
        host=app.config["HOST"],
        port=app.config["PORT"],
        debug=app.config["DEBUG"],
        use_reloader=False,
    )


if __name__ == "__main__":
    main()
