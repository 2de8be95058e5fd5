# Nothing here imports fuse-python; only mounting does.
def start(provider, mountpoint, **kwargs):
	from .Bridge import start as _start
	return _start(provider, mountpoint, **kwargs)
