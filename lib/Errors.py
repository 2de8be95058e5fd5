"""
lib/Errors.py

Purpose:
Defines the errors raised by the adapter when a filesystem call cannot be satisfied.

Place in Architecture:
Raised by the Adapter and Fallback modules (and by providers, if they choose to). The transport boundary turns them into negative errno values.

Interface:

	VFuseError: base class; an OSError carrying an errno and the offending path.
	PermissionDenied(path): EACCES.
	NotFound(path): ENOENT.
	UnsupportedOperation(path, op): ENOTSUP.
	InvalidArgument(message): EINVAL.

TODOs/FIXMEs:
None.
"""

import errno


class VFuseError(OSError):
	def __init__(this, code, message, path=None):
		super().__init__(code, message, path)
		this.path = path


class PermissionDenied(VFuseError):
	def __init__(this, path):
		super().__init__(errno.EACCES, "Permission denied", path)


class NotFound(VFuseError):
	def __init__(this, path):
		super().__init__(errno.ENOENT, "No such file or directory", path)


class UnsupportedOperation(VFuseError):
	def __init__(this, path, op):
		super().__init__(errno.ENOTSUP, f"{op} is not supported", path)
		this.op = op


class InvalidArgument(VFuseError):
	def __init__(this, message, path=None):
		super().__init__(errno.EINVAL, message, path)
