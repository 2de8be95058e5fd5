import logging

import fuse

from libvfuse import OperationContext, VirtualFSAdapter

from .FuseMethod import *

fuse.fuse_python_api = (0, 2)


# Kernel facing side of vfuse.
# Each callback picks up the caller from fuse.Fuse.GetContext() and hands the call to the adapter.
# Whatever open/create return comes back as *fh* in the file handle ops.
class VFuseBridge(fuse.Fuse):
	def __init__(this, adapter, *args, **kwargs):
		super(VFuseBridge, this).__init__(*args, **kwargs)
		this.adapter = adapter

	def Caller(this):
		return OperationContext.FromDict(this.GetContext())

	# -- Directory ops

	@FuseMethod
	def readdir(this, path, offset):
		return [fuse.Direntry(name) for name in this.adapter.readdir(this.Caller(), path)]

	@FuseMethod
	def mkdir(this, path, mode):
		return this.adapter.mkdir(this.Caller(), path, mode)

	@FuseMethod
	def rmdir(this, path):
		return this.adapter.rmdir(this.Caller(), path)

	# -- Handleless ops

	@FuseMethod
	def getattr(this, path):
		return this.adapter.getattr(this.Caller(), path)

	@FuseMethod
	def chmod(this, path, mode):
		return this.adapter.chmod(this.Caller(), path, mode)

	@FuseMethod
	def chown(this, path, uid, gid):
		return this.adapter.chown(this.Caller(), path, uid, gid)

	@FuseMethod
	def utime(this, path, times):
		return this.adapter.utime(this.Caller(), path, times)

	@FuseMethod
	def mknod(this, path, mode, dev):
		return this.adapter.mknod(this.Caller(), path, mode, dev)

	@FuseMethod
	def unlink(this, path):
		return this.adapter.unlink(this.Caller(), path)

	@FuseMethod
	def rename(this, old, new):
		return this.adapter.rename(this.Caller(), old, new)

	@FuseMethod
	def truncate(this, path, size):
		return this.adapter.truncate(this.Caller(), path, size)

	# -- File ops

	@FuseMethod
	def open(this, path, flags):
		return this.adapter.open(this.Caller(), path, flags)

	@FuseMethod
	def create(this, path, flags, mode):
		return this.adapter.create(this.Caller(), path, flags, mode)

	@FuseMethod
	def read(this, path, size, offset, fh):
		return this.adapter.read(this.Caller(), path, size, offset, fh)

	@FuseMethod
	def write(this, path, buf, offset, fh):
		return this.adapter.write(this.Caller(), path, buf, offset, fh)

	@FuseMethod
	def ftruncate(this, path, size, fh):
		return this.adapter.ftruncate(this.Caller(), path, size, fh)

	@FuseMethod
	def flush(this, path, fh=None):
		return this.adapter.flush(this.Caller(), path, fh)

	@FuseMethod
	def release(this, path, flags, fh):
		return this.adapter.release(this.Caller(), path, fh)

	# -- Unsupported

	@FuseMethod
	def symlink(this, target, name):
		return this.adapter.symlink(this.Caller(), target, name)

	@FuseMethod
	def link(this, target, name):
		return this.adapter.link(this.Caller(), target, name)

	@FuseMethod
	def readlink(this, path):
		return this.adapter.readlink(this.Caller(), path)

	@FuseMethod
	def setxattr(this, path, name, value, flags):
		return this.adapter.setxattr(this.Caller(), path, name, value, flags)

	@FuseMethod
	def getxattr(this, path, name, size):
		return this.adapter.getxattr(this.Caller(), path, name, size)

	@FuseMethod
	def listxattr(this, path, size):
		return this.adapter.listxattr(this.Caller(), path, size)

	@FuseMethod
	def removexattr(this, path, name):
		return this.adapter.removexattr(this.Caller(), path, name)

	@FuseMethod
	def statfs(this):
		return this.adapter.statfs(this.Caller())


# Mount *provider* at *mountpoint* and serve it until unmounted.
def start(provider, mountpoint, foreground=True, multithreaded=True, allow_other=False):
	server = VFuseBridge(VirtualFSAdapter(provider), dash_s_do='setsingle')
	server.fuse_args.mountpoint = str(mountpoint)
	if foreground:
		server.fuse_args.setmod('foreground')
	if allow_other:
		server.fuse_args.add('allow_other')
	server.multithreaded = multithreaded

	logging.info(f"Mounting {type(provider).__name__} at {mountpoint}")
	server.main()
	return server
