#!/usr/bin/env python3
# backend/run.py
"""
Development server runner.

Defaults to the mock geocoder and console email so a local run never calls
public services; export GEOCODING_PROVIDER=live to override.
"""
import os
import sys
from pathlib import Path

# Add backend to path
backend_dir = Path(__file__).parent
sys.path.insert(0, str(backend_dir))
os.chdir(backend_dir)

os.environ.setdefault("GEOCODING_PROVIDER", "mock")
os.environ.setdefault("EMAIL_PROVIDER", "console")

import uvicorn

if __name__ == "__main__":
    print("Starting Talent Portal development server")
    print(f"Geocoding provider: {os.environ['GEOCODING_PROVIDER']}")
    print("Access at: http://localhost:8000")
    print("API Docs: http://localhost:8000/docs")

    uvicorn.run("talent_portal.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
