import threading

from libvfuse import VirtualFilesystemProvider, PermissionDenied, current_context


# In-memory provider for tests.
# files: path -> bytes, dirs: set of paths. "/" always exists.
# calls records (method, path) for every mutator so tests can count provider I/O.
class MemoryProvider(VirtualFilesystemProvider):
	def __init__(this, files=None, dirs=None, writable=True, deletable=True):
		this.lock = threading.RLock()
		this.files = dict(files or {})
		this.dirs = set(dirs or [])
		this.writable = writable
		this.deletable = deletable
		this.executables = set()
		this.readonly = set()
		this.calls = []
		this.callers = [] # (method, path, context) for can_write queries

	def Parent(this, path):
		parent = path.rsplit("/", 1)[0]
		return parent or "/"

	def contents(this, path):
		with this.lock:
			names = []
			for p in list(this.dirs) + list(this.files.keys()):
				if p != "/" and this.Parent(p) == path:
					names.append(p.rsplit("/", 1)[1])
			return names

	def is_directory(this, path):
		return path == "/" or path in this.dirs

	def is_file(this, path):
		return path in this.files

	def read_file(this, path):
		with this.lock:
			return this.files[path]

	def size(this, path):
		return len(this.read_file(path))

	def times(this, path):
		return (1, 2, 3)

	def is_executable(this, path):
		return path in this.executables

	def can_write(this, path):
		this.callers.append(('can_write', path, current_context()))
		return this.writable and path not in this.readonly

	def can_mkdir(this, path):
		return this.writable

	def can_delete(this, path):
		return this.deletable

	def can_rmdir(this, path):
		return this.deletable

	def write_to(this, path, data):
		with this.lock:
			this.calls.append(('write_to', path))
			this.files[path] = bytes(data)

	def mkdir(this, path):
		with this.lock:
			this.calls.append(('mkdir', path))
			this.dirs.add(path)

	def rmdir(this, path):
		with this.lock:
			this.calls.append(('rmdir', path))
			this.dirs.discard(path)

	def delete(this, path):
		with this.lock:
			this.calls.append(('delete', path))
			if path not in this.files:
				raise PermissionDenied(path)
			del this.files[path]

	def CallCount(this, method):
		return len([c for c in this.calls if c[0] == method])


# Same as MemoryProvider, but serves byte I/O through the raw_* operations and renames natively.
class RawMemoryProvider(MemoryProvider):
	def __init__(this, *args, **kwargs):
		super().__init__(*args, **kwargs)
		this.tokens = {}
		this.nextToken = 1

	def raw_open(this, path, mode):
		with this.lock:
			token = this.nextToken
			this.nextToken += 1
			this.tokens[token] = (path, mode)
			this.calls.append(('raw_open', path))
			if path not in this.files:
				this.files[path] = b""
			return token

	def raw_read(this, path, offset, size, token):
		assert token in this.tokens
		data = this.files[path]
		if offset >= len(data):
			raise EOFError()
		return data[offset:offset + size]

	def raw_write(this, path, offset, size, buf, token):
		assert token in this.tokens
		with this.lock:
			data = this.files[path]
			if 'a' in this.tokens[token][1]:
				offset = len(data)
			data = data[:offset].ljust(offset, b"\x00") + buf[:size] + data[offset + size:]
			this.files[path] = data
			return size

	def raw_close(this, path, token):
		with this.lock:
			this.calls.append(('raw_close', path))
			del this.tokens[token]

	def raw_truncate(this, path, length, token=None):
		with this.lock:
			this.calls.append(('raw_truncate', path))
			this.files[path] = this.files[path][:max(length, 0)]
			return True

	def rename(this, src, dst):
		with this.lock:
			if src not in this.files:
				return False
			this.calls.append(('rename', src))
			this.files[dst] = this.files.pop(src)
			return True
