#!/usr/bin/env python3
"""
Dev server for the Wedplan API.

    python start_backend_simple.py            # serve with auto reload
    python start_backend_simple.py --init-db  # create missing tables first
"""

import os
import sys

import uvicorn

if __name__ == "__main__":
    project_root = os.path.dirname(os.path.abspath(__file__))
    os.chdir(project_root)
    sys.path.insert(0, project_root)

    from wedplan.config import HOST, PORT, RELOAD, LOG_LEVEL

    if "--init-db" in sys.argv[1:]:
        from wedplan.database_setup import setup_database

        setup_database()

    print(f"🚀 Wedplan API on http://{HOST}:{PORT} (docs at /docs)")
    uvicorn.run(
        "wedplan.main:app",
        host=HOST,
        port=PORT,
        reload=RELOAD,
        reload_dirs=["./wedplan"] if RELOAD else None,
        log_level=LOG_LEVEL.lower(),
    )
