"""Runtime configuration defaults for the storefront."""

from __future__ import annotations

from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DATA_DIR = Path(__file__).resolve().parents[3] / "data"
CATALOG_FILE = DATA_DIR / "catalog.json"

STORE_NAME = "Santto Hambúrguer"

# WhatsApp number that receives orders (country + area code, digits only).
ORDER_DESTINATION = "5591984497134"
WHATSAPP_URL = "https://wa.me/{destination}?text={text}"

PAYMENT_OPTIONS = ("PIX", "Cartão de Crédito", "Cartão de Débito", "Dinheiro")
DEFAULT_BASE_ID = "base_burger"
