import os
import logging
from pathlib import Path
from typing import Optional

try:
	from dotenv import load_dotenv
except ImportError:
	logging.warning("python-dotenv not available; using environment variables only")
else:
	loaded = load_dotenv()
	if not loaded and Path(".env").exists():
		raise RuntimeError(".env file present but failed to load")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def get_optional_str_env(name: str) -> Optional[str]:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return None
	return raw


def get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def get_optional_int_env(name: str) -> Optional[int]:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return None
	try:
		return int(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return None


def get_float_env(name: str, default: float) -> float:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return float(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def get_optional_float_env(name: str) -> Optional[float]:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return None
	try:
		return float(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return None


def get_bool_env(name: str, default: bool) -> bool:
	raw = os.getenv(name)
	if raw is None or raw.strip() == "":
		return default
	value = raw.strip().lower()
	if value in _TRUE_VALUES:
		return True
	if value in _FALSE_VALUES:
		return False
	logging.error("Invalid %s: %r", name, raw)
	return default


def get_list_env(name: str) -> Optional[list[str]]:
	"""Comma-separated list; None when unset so callers keep their built-in default."""
	raw = os.getenv(name)
	if raw is None or raw.strip() == "":
		return None
	return [item.strip() for item in raw.split(",") if item.strip()]


DEFAULT_MAX_PAGES = 50


def coerce_max_pages(value, default: int = DEFAULT_MAX_PAGES) -> int:
	"""Turn a caller-supplied page ceiling into a positive int.

	Accepts ints and numeric strings. Anything else (None, garbage, zero or
	negative numbers, booleans) falls back to `default`.
	"""
	if value is None or isinstance(value, bool):
		return default
	try:
		parsed = int(str(value).strip())
	except (TypeError, ValueError):
		logging.debug("Ignoring non-numeric max_pages: %r", value)
		return default
	if parsed <= 0:
		return default
	return parsed
