"""
lib/Context.py

Purpose:
Carries the identity of the caller for the duration of one dispatched filesystem call.

Place in Architecture:
The Adapter enters a scope for every call it receives. Providers may ask who is calling (e.g. inside can_write) without the adapter threading the identity through every provider method.

Interface:

	OperationContext(uid, gid, pid=None): the caller identity.
	OperationContext.FromDict(d): builds a context from a {'uid', 'gid', 'pid'} mapping.
	OperationContext.Scope(): context manager making this the current context.
	current_context(), reader_uid(), reader_gid(): read the current caller (None outside a call).

TODOs/FIXMEs:
None.
"""

import contextvars
from collections import namedtuple
from contextlib import contextmanager

# Each worker thread (and each asyncio task) sees its own value.
_current = contextvars.ContextVar("vfuse_operation_context", default=None)


class OperationContext(namedtuple("OperationContext", ["uid", "gid", "pid"])):
	__slots__ = ()

	def __new__(cls, uid, gid, pid=None):
		return super().__new__(cls, uid, gid, pid)

	@classmethod
	def FromDict(cls, d):
		return cls(d.get('uid'), d.get('gid'), d.get('pid'))

	# Make *this the current context until the with block exits, even on error.
	# The previous context (usually None) is restored afterwards.
	@contextmanager
	def Scope(this):
		token = _current.set(this)
		try:
			yield this
		finally:
			_current.reset(token)


def current_context():
	return _current.get()


def reader_uid():
	ctx = _current.get()
	return ctx.uid if ctx is not None else None


def reader_gid():
	ctx = _current.get()
	return ctx.gid if ctx is not None else None
