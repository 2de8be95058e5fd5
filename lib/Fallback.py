"""
lib/Fallback.py

Purpose:
Emulates truncate and rename with the provider's whole-file primitives, for providers without native equivalents.

Place in Architecture:
Called by the Adapter only after the provider declined (raw_truncate / rename returned False).

Interface:

	truncate(provider, path, length): rewrites the file with its first *length* bytes.
	rename(provider, src, dst): copies src to dst, then deletes src. Plain files only.

TODOs/FIXMEs:
None.
"""

import logging

from .Errors import PermissionDenied


# Truncating to a length at or past the end leaves the file untouched; files are never padded.
def truncate(provider, path, length):
	contents = provider.read_file(path)
	if length <= 0:
		provider.write_to(path, b"")
	elif length < len(contents):
		provider.write_to(path, contents[:length])
	else:
		logging.debug(f"Not extending {path} from {len(contents)} to {length} bytes")


# Directories cannot be moved this way.
def rename(provider, src, dst):
	if not (provider.is_file(src) and provider.can_write(dst) and provider.can_delete(src)):
		raise PermissionDenied(src)

	logging.debug(f"Moving {src} to {dst} by copy")
	contents = provider.read_file(src)
	provider.write_to(dst, contents)
	provider.delete(src)
