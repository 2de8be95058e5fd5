from .Errors import VFuseError, PermissionDenied, NotFound, UnsupportedOperation, InvalidArgument
from .Context import OperationContext, current_context, reader_uid, reader_gid
from .Mode import directory_mode, file_mode
from .Stat import Stat
from .Provider import VirtualFilesystemProvider
from .FileHandle import FileHandle
from .HandleTable import HandleTable, HandleId
from .Adapter import VirtualFSAdapter
from . import Fallback
