"""
lib/HandleTable.py

Purpose:
Slot map holding the open FileHandles, addressed by (slot, generation).

Place in Architecture:
Owned by the Adapter. The HandleId returned from open travels through the kernel binding and comes back with every read/write/flush/release.
Releasing a handle bumps the slot's generation, so an id that outlived its handle is rejected instead of reaching whatever reuses the slot.

Interface:

	Allocate(handle) -> HandleId
	Get(handleId) -> FileHandle; raises IOError(EBADF) for unknown or stale ids.
	Release(handleId) -> the FileHandle that was stored.
	__len__(): number of open handles.

TODOs/FIXMEs:
None.
"""

import errno
import threading
from collections import namedtuple

HandleId = namedtuple("HandleId", ["slot", "generation"])


class HandleTable(object):
	def __init__(this):
		this.lock = threading.Lock()
		this.handles = [] # slot -> FileHandle or None
		this.generations = [] # slot -> current generation
		this.free = []

	def __len__(this):
		with this.lock:
			return len(this.handles) - len(this.free)

	def Allocate(this, handle):
		with this.lock:
			if this.free:
				slot = this.free.pop()
				this.handles[slot] = handle
			else:
				slot = len(this.handles)
				this.handles.append(handle)
				this.generations.append(0)
			return HandleId(slot, this.generations[slot])

	def Get(this, handleId):
		with this.lock:
			return this._Lookup(handleId)

	def Release(this, handleId):
		with this.lock:
			handle = this._Lookup(handleId)
			this.handles[handleId.slot] = None
			this.generations[handleId.slot] += 1
			this.free.append(handleId.slot)
			return handle

	def _Lookup(this, handleId):
		try:
			slot, generation = handleId
		except (TypeError, ValueError):
			raise IOError(errno.EBADF, f"Not a file handle: {handleId!r}")

		if not 0 <= slot < len(this.handles):
			raise IOError(errno.EBADF, f"Unknown file handle: {handleId!r}")

		handle = this.handles[slot]
		if handle is None or this.generations[slot] != generation:
			raise IOError(errno.EBADF, f"Stale file handle: {handleId!r}")
		return handle
