from libvfuse import VirtualFilesystemProvider


# Smallest useful provider: one read-only file at the root.
# Mount with: vfuse --mount /tmp/hello --provider vfuse.hello:HelloProvider
class HelloProvider(VirtualFilesystemProvider):
	greeting = b"Hello, World!\n"

	def contents(this, path):
		return ['hello.txt']

	def is_file(this, path):
		return path == '/hello.txt'

	def read_file(this, path):
		return this.greeting

	def size(this, path):
		return len(this.read_file(path))
