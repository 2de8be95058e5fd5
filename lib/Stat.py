"""
lib/Stat.py

Purpose:
Attribute record returned by getattr.

Place in Architecture:
Built by the Adapter. Carries the st_* fields the kernel binding expects, so it can be handed to fuse-python as is.

Interface:

	Stat(**kw): st_* fields, all defaulting to 0.
	Stat.Directory(mode, **kw) / Stat.File(mode, **kw): add the matching file type bits to mode.
	IsDirectory() / IsFile().

TODOs/FIXMEs:
None.
"""

import stat


class Stat(object):
	fields = [
		'st_mode',
		'st_ino',
		'st_dev',
		'st_nlink',
		'st_uid',
		'st_gid',
		'st_size',
		'st_atime',
		'st_mtime',
		'st_ctime',
	]

	def __init__(this, **kw):
		for field in this.fields:
			setattr(this, field, kw.pop(field, 0))
		if kw:
			raise TypeError(f"Unknown stat fields: {list(kw.keys())}")

	def __repr__(this):
		return f"Stat(mode={oct(this.st_mode)}, size={this.st_size}, nlink={this.st_nlink})"

	@classmethod
	def Directory(cls, mode, **kw):
		kw.setdefault('st_nlink', 1)
		return cls(st_mode=stat.S_IFDIR | stat.S_IMODE(mode), **kw)

	@classmethod
	def File(cls, mode, **kw):
		kw.setdefault('st_nlink', 1)
		return cls(st_mode=stat.S_IFREG | stat.S_IMODE(mode), **kw)

	def IsDirectory(this):
		return stat.S_ISDIR(this.st_mode)

	def IsFile(this):
		return stat.S_ISREG(this.st_mode)

	def Permissions(this):
		return stat.S_IMODE(this.st_mode)
