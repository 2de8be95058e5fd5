"""
lib/FileHandle.py

Purpose:
Per-open-file state: access flags, and either a raw token from the provider or a buffered copy of the whole file.

Place in Architecture:
Created by Adapter.open, stored in the HandleTable and discarded on release. One FileHandle per open file descriptor; never shared, even for the same path.

Interface:

	__init__(path, flags): derives the access mode from flags (os.O_ACCMODE, os.O_APPEND).
	rdonly / wronly / rdwr / append / reading / writing: access mode predicates.
	raw_mode: the mode string handed to provider.raw_open ("r", "w", "rw", plus "a").
	IsRaw(): whether all I/O is delegated to the provider.
	read(offset, size), write(offset, data), truncate(length): operate on the buffer.
	flush(sink): passes the buffered bytes to sink if modified, then clears the modified flag.
	close(): marks the handle unusable.

TODOs/FIXMEs:
None.
"""

import os
import errno
import threading


class FileHandle(object):

	def __init__(this, path, flags):
		this.path = path
		this.flags = flags
		this.raw = None # Token from provider.raw_open. When set, the buffer is unused.
		this.modified = False
		this.closed = False
		this.lock = threading.RLock()
		this._contents = bytearray()

	def __repr__(this):
		kind = "raw" if this.IsRaw() else "buffered"
		return f"FileHandle({this.path!r}, {this.raw_mode!r}, {kind})"

	# -- Access mode

	@property
	def accmode(this):
		return this.flags & os.O_ACCMODE

	@property
	def rdonly(this):
		return this.accmode == os.O_RDONLY

	@property
	def wronly(this):
		return this.accmode == os.O_WRONLY

	@property
	def rdwr(this):
		return this.accmode == os.O_RDWR

	@property
	def reading(this):
		return this.rdonly or this.rdwr

	@property
	def writing(this):
		return this.wronly or this.rdwr

	@property
	def append(this):
		return this.writing and bool(this.flags & os.O_APPEND)

	@property
	def raw_mode(this):
		if this.rdwr:
			mode = "rw"
		elif this.wronly:
			mode = "w"
		elif this.rdonly:
			mode = "r"
		else:
			mode = ""

		if this.append:
			mode += "a"
		return mode

	def IsRaw(this):
		return this.raw is not None

	# -- Buffer

	@property
	def contents(this):
		with this.lock:
			return bytes(this._contents)

	@contents.setter
	def contents(this, data):
		with this.lock:
			this.CheckOpen()
			this._contents = bytearray(data if data is not None else b"")

	def CheckOpen(this):
		if this.closed:
			raise IOError(errno.EBADF, "Operation on a closed file")

	# Offsets outside the buffer yield nothing.
	def read(this, offset, size):
		with this.lock:
			this.CheckOpen()
			if offset < 0 or size <= 0:
				return b""
			return bytes(this._contents[offset:offset + size])

	# Appending writes, and writes at or past the end, go to the end of the buffer regardless of offset.
	# Anything else overwrites in place.
	# RETURNS the number of bytes accepted, which is always all of them.
	def write(this, offset, data):
		with this.lock:
			this.CheckOpen()
			if this.append or offset >= len(this._contents):
				this._contents.extend(data)
			else:
				this._contents[offset:offset + len(data)] = data
			this.modified = True
			return len(data)

	def truncate(this, length):
		with this.lock:
			this.CheckOpen()
			if length <= 0:
				this._contents = bytearray()
			else:
				del this._contents[length:]
			this.modified = True

	# Hands the buffer to sink (e.g. provider.write_to) if it changed since the last flush.
	# The modified flag is only cleared once sink returns.
	# RETURNS whether sink was called.
	def flush(this, sink):
		with this.lock:
			if not this.modified:
				return False
			sink(bytes(this._contents))
			this.modified = False
			return True

	def close(this):
		with this.lock:
			this.CheckOpen()
			this.closed = True
			this._contents = bytearray()
