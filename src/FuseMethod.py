import errno
import logging
import threading

log_lock = threading.Lock()


# Error boundary between the adapter and the kernel binding.
# fuse-python expects a negative errno for failures, never an exception.
def FuseMethod(func):
	def wrapper(*a, **kw):
		try:
			return func(*a, **kw)
		except (IOError, OSError) as e:
			with log_lock:
				if getattr(e, 'errno', None) == errno.ENOENT:
					logging.debug(f"Failed operation: {func.__name__}", exc_info=True)
				else:
					logging.info(f"Failed operation: {func.__name__}", exc_info=True)

			if hasattr(e, 'errno') and isinstance(e.errno, int):
				# Standard operation
				return -e.errno
			return -errno.EACCES

		except Exception:
			with log_lock:
				logging.warning(f"Unexpected exception in {func.__name__}", exc_info=True)
			return -errno.EIO

	wrapper.__name__ = func.__name__
	wrapper.__doc__ = func.__doc__
	return wrapper
