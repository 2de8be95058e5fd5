"""
lib/Adapter.py

Purpose:
Dispatches filesystem calls (lookup, read, write, create, rename, ...) to a VirtualFilesystemProvider.

Place in Architecture:
Sits between the kernel binding (vfuse.Bridge) and the application's provider. Every entry point takes the caller's OperationContext first, makes it current for the duration of the call, checks the provider's predicates, and either returns a result or raises one of the errors in Errors.
Open files are tracked in a HandleTable; files announced with mknod but not yet written are tracked in created_files.

Interface:

	VirtualFSAdapter(root): root is the provider.
	Directory ops: readdir, mkdir, rmdir.
	Attribute ops: getattr, chmod, chown, utime.
	Node ops: mknod, create, unlink, rename, truncate.
	File handle ops: open, read, write, flush, release, ftruncate.
	Unsupported ops: symlink, link, readlink, setxattr, getxattr, listxattr, removexattr, statfs.

TODOs/FIXMEs:
None.
"""

import os
import stat
import time
import logging
import threading

from .Context import OperationContext, current_context
from .Errors import InvalidArgument, NotFound, PermissionDenied, UnsupportedOperation
from .FileHandle import FileHandle
from .HandleTable import HandleTable
from .Mode import directory_mode, file_mode
from .Stat import Stat
from . import Fallback


# Run the wrapped entry point inside the caller's context.
# A None ctx means the call came from within another entry point (e.g. release -> flush), which keeps the enclosing context.
def Operation(func):
	def wrapper(this, ctx, *a, **kw):
		if ctx is None:
			return func(this, ctx, *a, **kw)

		if not isinstance(ctx, OperationContext):
			ctx = OperationContext(ctx.uid, ctx.gid, getattr(ctx, 'pid', None))

		with ctx.Scope():
			return func(this, ctx, *a, **kw)

	wrapper.__name__ = func.__name__
	wrapper.__doc__ = func.__doc__
	return wrapper


# The kernel validates most paths with a getattr before calling anything else, so they are not revalidated here.
class VirtualFSAdapter(object):

	# Appended to a directory's path to ask the provider whether files may be created there.
	CHECK_FILE = "/._vfuse_check_"

	def __init__(this, root):
		this.root = root
		this.handles = HandleTable()

		# Files made by mknod that have no content in the provider yet: path -> mode
		this.created_files = {}
		this.lock = threading.RLock()

	# -- Pending creates

	def IsPending(this, path):
		with this.lock:
			return path in this.created_files

	def GetPendingMode(this, path):
		with this.lock:
			return this.created_files.get(path)

	# RETURNS whether path was pending.
	def ClearPending(this, path):
		with this.lock:
			return this.created_files.pop(path, None) is not None

	# -- Ownership

	def GetProcessIds(this):
		return os.getuid(), os.getgid()

	def GetCallerIds(this):
		ctx = current_context()
		if ctx is None or ctx.uid is None:
			return this.GetProcessIds()
		return ctx.uid, ctx.gid

	# -- Directory ops

	@Operation
	def readdir(this, ctx, path):
		entries = [".", ".."]
		entries.extend(this.root.contents(path))
		return entries

	@Operation
	def mkdir(this, ctx, path, mode=0o755):
		if not this.root.can_mkdir(path):
			raise PermissionDenied(path)

		logging.debug(f"mkdir {path}")
		this.root.mkdir(path)
		return 0

	@Operation
	def rmdir(this, ctx, path):
		if not this.root.can_rmdir(path):
			raise PermissionDenied(path)

		logging.debug(f"rmdir {path}")
		this.root.rmdir(path)
		return 0

	# -- Attribute ops

	@Operation
	def getattr(this, ctx, path):
		uid, gid = this.GetProcessIds()

		if path == "/" or this.root.is_directory(path):
			# A provider may allow creating files in a directory without allowing anything on the directory itself.
			probe = ("" if path == "/" else path) + this.CHECK_FILE
			writable = this.root.can_mkdir(probe) or this.root.can_write(probe)
			atime, mtime, ctime = this.root.times(path)

			# nlink is 1 rather than 2 + subdirectories; find trusts the latter and skips entries.
			return Stat.Directory(
				directory_mode(writable),
				st_uid=uid,
				st_gid=gid,
				st_nlink=1,
				st_atime=atime,
				st_mtime=mtime,
				st_ctime=ctime
			)

		pendingMode = this.GetPendingMode(path)
		if pendingMode is not None:
			uid, gid = this.GetCallerIds()
			now = int(time.time())
			return Stat.File(
				pendingMode,
				st_uid=uid,
				st_gid=gid,
				st_size=0,
				st_atime=now,
				st_mtime=now,
				st_ctime=now
			)

		if this.root.is_file(path):
			mode = file_mode(this.root.can_write(path), this.root.is_executable(path))
			atime, mtime, ctime = this.root.times(path)
			return Stat.File(
				mode,
				st_uid=uid,
				st_gid=gid,
				st_size=this.root.size(path),
				st_atime=atime,
				st_mtime=mtime,
				st_ctime=ctime
			)

		raise NotFound(path)

	# Accepted and ignored. Tools like cp -p call these and should not fail; the provider decides permissions.
	@Operation
	def chmod(this, ctx, path, mode):
		return 0

	@Operation
	def chown(this, ctx, path, uid, gid):
		return 0

	# times is (atime, mtime), or None for "now".
	@Operation
	def utime(this, ctx, path, times=None):
		mtime = times[1] if times is not None else time.time()
		this.root.touch(path, mtime)
		return 0

	# -- Node ops

	# Only regular files may be made. Nothing reaches the provider until the first flush.
	@Operation
	def mknod(this, ctx, path, mode, dev=0):
		if stat.S_IFMT(mode) != stat.S_IFREG or not this.root.can_write(path):
			raise PermissionDenied(path)

		logging.debug(f"mknod {path} ({oct(mode)})")
		with this.lock:
			this.created_files[path] = mode
		return 0

	# Single step create; the same as mknod followed by open.
	@Operation
	def create(this, ctx, path, flags, mode):
		this.mknod(None, path, stat.S_IFREG | stat.S_IMODE(mode))
		return this.open(None, path, flags)

	@Operation
	def unlink(this, ctx, path):
		if not this.root.can_delete(path):
			raise PermissionDenied(path)

		logging.debug(f"unlink {path}")
		if this.ClearPending(path) and not this.root.is_file(path):
			return 0

		this.root.delete(path)
		return 0

	@Operation
	def rename(this, ctx, src, dst):
		# A file made by mknod and never written only exists here.
		pendingMode = this.GetPendingMode(src)
		if pendingMode is not None and not this.root.is_file(src):
			if not this.root.can_write(dst):
				raise PermissionDenied(dst)
			with this.lock:
				this.created_files.pop(src, None)
				this.created_files[dst] = pendingMode
			return 0

		if this.root.rename(src, dst):
			logging.debug(f"rename {src} -> {dst}")
		else:
			Fallback.rename(this.root, src, dst)

		# dst has provider content now, even if mknod announced it earlier.
		this.ClearPending(src)
		this.ClearPending(dst)
		return 0

	# Truncate a file that may not be open.
	@Operation
	def truncate(this, ctx, path, length):
		if not this.root.can_write(path):
			raise PermissionDenied(path)

		if this.IsPending(path):
			return 0

		if not this.root.raw_truncate(path, length):
			Fallback.truncate(this.root, path, length)
		return 0

	# -- File handle ops

	# Builds a FileHandle and RETURNS its HandleId. O_CREAT and O_TRUNC are left to the kernel, which sends mknod and truncate first.
	@Operation
	def open(this, ctx, path, flags):
		fh = FileHandle(path, flags)
		if not (fh.reading or fh.writing):
			raise PermissionDenied(path)

		token = this.root.raw_open(path, fh.raw_mode)
		if token is not None and token is not False:
			fh.raw = token
			if fh.writing:
				# The provider backs the file from here on.
				this.ClearPending(path)

		if not fh.IsRaw():
			if fh.rdonly:
				fh.contents = b"" if this.IsPending(path) else this.root.read_file(path)
			else:
				if not this.root.can_write(path):
					raise PermissionDenied(path)

				if this.IsPending(path):
					fh.contents = b""
				elif fh.rdwr or fh.append:
					fh.contents = this.root.read_file(path)
				else:
					# Write only without append should have been preceded by a truncate; start empty anyway.
					fh.contents = b""

		handleId = this.handles.Allocate(fh)
		logging.debug(f"open {path} as {fh!r} -> {handleId}")
		return handleId

	@Operation
	def read(this, ctx, path, size, offset, fh):
		handle = this.handles.Get(fh)
		try:
			if handle.IsRaw():
				return this.root.raw_read(path, offset, size, handle.raw)
			return handle.read(offset, size)
		except EOFError:
			return b""

	@Operation
	def write(this, ctx, path, buf, offset, fh):
		handle = this.handles.Get(fh)
		if handle.IsRaw():
			written = this.root.raw_write(path, offset, len(buf), buf, handle.raw)
			return len(buf) if written is None else written
		if offset < 0:
			raise InvalidArgument(f"negative write offset {offset}", path)
		return handle.write(offset, buf)

	@Operation
	def ftruncate(this, ctx, path, length, fh):
		handle = this.handles.Get(fh)
		if handle.IsRaw():
			this.root.raw_truncate(path, length, handle.raw)
		else:
			handle.truncate(length)
		return 0

	@Operation
	def flush(this, ctx, path, fh):
		if fh is None:
			return 0

		handle = this.handles.Get(fh)
		if handle.IsRaw():
			return 0

		if handle.flush(lambda contents: this.root.write_to(path, contents)):
			# The file exists in the provider now.
			this.ClearPending(path)
			logging.debug(f"flushed {path}")
		return 0

	@Operation
	def release(this, ctx, path, fh):
		handle = this.handles.Get(fh)
		try:
			this.flush(None, path, fh)
		finally:
			this.handles.Release(fh)
			if handle.IsRaw():
				this.root.raw_close(path, handle.raw)
			handle.close()
		return 0

	# -- Unsupported

	@Operation
	def symlink(this, ctx, target, name):
		raise UnsupportedOperation(name, "symlink")

	@Operation
	def link(this, ctx, target, name):
		raise UnsupportedOperation(name, "link")

	@Operation
	def readlink(this, ctx, path):
		raise UnsupportedOperation(path, "readlink")

	@Operation
	def setxattr(this, ctx, path, name, value, flags):
		raise UnsupportedOperation(path, "setxattr")

	@Operation
	def getxattr(this, ctx, path, name, size):
		raise UnsupportedOperation(path, "getxattr")

	@Operation
	def listxattr(this, ctx, path, size):
		raise UnsupportedOperation(path, "listxattr")

	@Operation
	def removexattr(this, ctx, path, name):
		raise UnsupportedOperation(path, "removexattr")

	@Operation
	def statfs(this, ctx):
		raise UnsupportedOperation("/", "statfs")
