"""Jinja2 template environment shared by pages and cart fragments."""
from pathlib import Path

from fastapi.templating import Jinja2Templates

from storefront.money import format_money

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["money"] = format_money
