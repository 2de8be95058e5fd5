import logging
import importlib


def parse_log_level(log_level):
	try:
		return {'error': logging.ERROR,
				'warning': logging.WARNING,
				'info': logging.INFO,
				'debug': logging.DEBUG}[log_level.lower()]
	except (KeyError, AttributeError):
		raise ValueError("invalid log level specifier")


# Accepts "package.module:ClassName" or "package.module.ClassName".
# RETURNS the class, not an instance.
def load_provider_class(target):
	if not isinstance(target, str) or not target.strip():
		raise ValueError("empty provider specifier")

	target = target.strip()
	if ":" in target:
		moduleName, _, className = target.partition(":")
	else:
		moduleName, _, className = target.rpartition(".")

	if not moduleName or not className:
		raise ValueError(f"invalid provider specifier: {target}")

	try:
		module = importlib.import_module(moduleName)
	except ImportError as e:
		raise ValueError(f"cannot import {moduleName}: {e}")

	try:
		return getattr(module, className)
	except AttributeError:
		raise ValueError(f"{moduleName} has no attribute {className}")


def parse_bool(value):
	if isinstance(value, bool):
		return value
	if isinstance(value, (int, float)):
		return bool(value)
	if isinstance(value, str):
		lowered = value.strip().lower()
		if lowered in ('1', 'true', 'yes', 'on'):
			return True
		if lowered in ('0', 'false', 'no', 'off', ''):
			return False
	raise ValueError(f"not a boolean: {value!r}")
