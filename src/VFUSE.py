import eons
import logging
import logging.handlers

from pathlib import Path

from .Utils import *


# VFUSE mounts a VirtualFilesystemProvider.
# Name is caps to make it executable per eons weirdness.
class VFUSE(eons.Executor):
	def __init__(this, name="VFUSE"):
		super(VFUSE, this).__init__(name)

		this.arg.kw.required.append("mount")
		this.arg.kw.required.append("provider") # e.g. "vfuse.hello:HelloProvider"

		this.arg.kw.optional["daemon"] = False
		this.arg.kw.optional["multithreaded"] = True
		this.arg.kw.optional["allow_other"] = False
		this.arg.kw.optional["log_level"] = "warning"

	# ValidateArgs is automatically called before Function, per eons.Functor.
	def ValidateArgs(this):
		super().ValidateArgs()

		try:
			this.log_level = parse_log_level(this.log_level)
		except ValueError:
			raise eons.MissingArgumentError(f"error: --log-level {this.log_level} is not a valid log level")

		try:
			this.daemon = parse_bool(this.daemon)
			this.multithreaded = parse_bool(this.multithreaded)
			this.allow_other = parse_bool(this.allow_other)
		except ValueError as e:
			raise eons.MissingArgumentError(f"error: {e}")

		try:
			this.provider_class = load_provider_class(this.provider)
		except ValueError as e:
			raise eons.MissingArgumentError(f"error: --provider {this.provider}: {e}")

		if not Path(this.mount).is_dir():
			raise eons.MissingArgumentError(f"error: --mount {this.mount} is not a directory")

	def Function(this):
		this.SetupLogging()

		# Imported here so the rest of vfuse works without fuse-python installed.
		from .Bridge import start

		start(
			this.provider_class(),
			this.mount,
			foreground=not this.daemon,
			multithreaded=this.multithreaded,
			allow_other=this.allow_other
		)

	def SetupLogging(this):
		logger = logging.getLogger('')
		if not this.daemon:
			# console logging only
			handler = logging.StreamHandler()
			fmt = logging.Formatter(fmt=("%(asctime)s vfuse[%(process)d]: " +
										 str(this.mount) + " %(levelname)s: %(message)s"))
		else:
			# to syslog
			handler = logging.handlers.SysLogHandler(address='/dev/log')
			fmt = logging.Formatter(fmt=("vfuse[%(process)d]: " +
										 str(this.mount) + ": %(levelname)s: %(message)s"))

		handler.setFormatter(fmt)
		logger.addHandler(handler)
		logger.setLevel(this.log_level)


def main():
	VFUSE()()
