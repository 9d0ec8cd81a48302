"""
Neon E-Shop - Main FastAPI Application

Single entry point for pages and API routes (Vercel serverless function).
"""
import sys
from pathlib import Path

# Project root on sys.path for Vercel, where api/ is the function root
_base_path = Path(__file__).resolve().parent.parent
if str(_base_path) not in sys.path:
    sys.path.insert(0, str(_base_path))

from storefront.app import create_app  # noqa: E402

app = create_app()
