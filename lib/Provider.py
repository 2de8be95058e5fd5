"""
lib/Provider.py

Purpose:
Defines the virtual filesystem provider interface that applications implement.

Place in Architecture:
The Adapter holds a (non-owning) reference to one provider and asks it every semantic question: what exists, who may change it, what it contains.
The provider is free to consult Context.current_context() to answer permission questions per caller.

Interface:

	Required: contents(path), is_file(path), read_file(path).
	Read-only defaults: is_directory, size, times, is_executable, can_write, can_mkdir, can_delete, can_rmdir (all False / zero);
		write_to, mkdir, rmdir, delete raise PermissionDenied.
	Optional capabilities:
		raw_open(path, mode) -> token or None. None means "buffer the whole file".
		raw_read(path, offset, size, token) -> bytes
		raw_write(path, offset, size, buf, token) -> number of bytes written
		raw_close(path, token)
		raw_truncate(path, length, token=None) -> True if handled. False makes the adapter emulate it.
		touch(path, mtime) -> no-op by default.
		rename(src, dst) -> True if handled. False makes the adapter copy then delete.

TODOs/FIXMEs:
None.
"""

from .Errors import PermissionDenied, UnsupportedOperation


# Paths handed to a provider are absolute within the mount, e.g. "/dir/file.txt". "/" is the root.
# Contents are bytes.
class VirtualFilesystemProvider(object):

	# -- Required

	# RETURNS the names (not paths) of the entries of the directory at path, in display order.
	def contents(this, path):
		raise NotImplementedError

	def is_file(this, path):
		raise NotImplementedError

	def read_file(this, path):
		raise NotImplementedError

	# -- Queries with read-only defaults

	def is_directory(this, path):
		return False

	def size(this, path):
		return len(this.read_file(path))

	# RETURNS (atime, mtime, ctime) in seconds since the epoch.
	def times(this, path):
		return (0, 0, 0)

	def is_executable(this, path):
		return False

	def can_write(this, path):
		return False

	def can_mkdir(this, path):
		return False

	def can_delete(this, path):
		return False

	def can_rmdir(this, path):
		return False

	# -- Mutators. Only called after the matching can_* predicate said yes.

	def write_to(this, path, data):
		raise PermissionDenied(path)

	def mkdir(this, path):
		raise PermissionDenied(path)

	def rmdir(this, path):
		raise PermissionDenied(path)

	def delete(this, path):
		raise PermissionDenied(path)

	# -- Optional capabilities

	def raw_open(this, path, mode):
		return None

	def raw_read(this, path, offset, size, token):
		raise UnsupportedOperation(path, "raw_read")

	def raw_write(this, path, offset, size, buf, token):
		raise UnsupportedOperation(path, "raw_write")

	def raw_close(this, path, token):
		pass

	def raw_truncate(this, path, length, token=None):
		return False

	def touch(this, path, mtime):
		pass

	def rename(this, src, dst):
		return False
