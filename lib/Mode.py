"""
lib/Mode.py

Purpose:
Translates provider capability predicates into POSIX permission bits.

Place in Architecture:
Pure helpers used by Adapter.getattr. No state.

Interface:

	directory_mode(writable): 0o777 or 0o555.
	file_mode(writable, executable): 0o444 plus 0o222 and/or 0o111.

TODOs/FIXMEs:
None.
"""

DIR_READONLY = 0o555
DIR_WRITABLE = 0o777

FILE_BASE = 0o444
FILE_WRITE = 0o222
FILE_EXECUTE = 0o111


def directory_mode(writable):
	return DIR_WRITABLE if writable else DIR_READONLY


def file_mode(writable, executable):
	mode = FILE_BASE
	if writable:
		mode |= FILE_WRITE
	if executable:
		mode |= FILE_EXECUTE
	return mode
