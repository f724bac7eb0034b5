"""
Standard library registry.

Static list of top-level module names bundled with CPython 3.12, plus the
modules removed in 3.12 that still show up in real code bases
(asynchat, asyncore, distutils, imp, smtpd). The list is pinned and does
not depend on the interpreter running the scan.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Iterator

PINNED_VERSION = "3.12"

_PUBLIC = (
    "__future__", "abc", "aifc", "antigravity", "argparse", "array", "ast",
    "asynchat", "asyncio", "asyncore", "atexit", "audioop", "base64", "bdb",
    "binascii", "bisect", "builtins", "bz2", "cProfile", "calendar", "cgi",
    "cgitb", "chunk", "cmath", "cmd", "code", "codecs", "codeop",
    "collections", "colorsys", "compileall", "concurrent", "configparser",
    "contextlib", "contextvars", "copy", "copyreg", "crypt", "csv", "ctypes",
    "curses", "dataclasses", "datetime", "dbm", "decimal", "difflib", "dis",
    "distutils", "doctest", "email", "encodings", "ensurepip", "enum",
    "errno", "faulthandler", "fcntl", "filecmp", "fileinput", "fnmatch",
    "fractions", "ftplib", "functools", "gc", "genericpath", "getopt",
    "getpass", "gettext", "glob", "graphlib", "grp", "gzip", "hashlib",
    "heapq", "hmac", "html", "http", "idlelib", "imaplib", "imghdr", "imp",
    "importlib", "inspect", "io", "ipaddress", "itertools", "json", "keyword",
    "lib2to3", "linecache", "locale", "logging", "lzma", "mailbox", "mailcap",
    "marshal", "math", "mimetypes", "mmap", "modulefinder", "msilib",
    "msvcrt", "multiprocessing", "netrc", "nis", "nntplib", "nt", "ntpath",
    "nturl2path", "numbers", "opcode", "operator", "optparse", "os",
    "ossaudiodev", "pathlib", "pdb", "pickle", "pickletools", "pipes",
    "pkgutil", "platform", "plistlib", "poplib", "posix", "posixpath",
    "pprint", "profile", "pstats", "pty", "pwd", "py_compile", "pyclbr",
    "pydoc", "pydoc_data", "pyexpat", "queue", "quopri", "random", "re",
    "readline", "reprlib", "resource", "rlcompleter", "runpy", "sched",
    "secrets", "select", "selectors", "shelve", "shlex", "shutil", "signal",
    "site", "smtpd", "smtplib", "sndhdr", "socket", "socketserver", "spwd",
    "sqlite3", "sre_compile", "sre_constants", "sre_parse", "ssl", "stat",
    "statistics", "string", "stringprep", "struct", "subprocess", "sunau",
    "symtable", "sys", "sysconfig", "syslog", "tabnanny", "tarfile",
    "telnetlib", "tempfile", "termios", "textwrap", "this", "threading",
    "time", "timeit", "tkinter", "token", "tokenize", "tomllib", "trace",
    "traceback", "tracemalloc", "tty", "turtle", "turtledemo", "types",
    "typing", "unicodedata", "unittest", "urllib", "uu", "uuid", "venv",
    "warnings", "wave", "weakref", "webbrowser", "winreg", "winsound",
    "wsgiref", "xdrlib", "xml", "xmlrpc", "zipapp", "zipfile", "zipimport",
    "zlib", "zoneinfo",
)

# Built-in accelerator modules that are imported directly often enough to matter.
_PRIVATE = (
    "_abc", "_ast", "_asyncio", "_bisect", "_bz2", "_codecs",
    "_collections", "_collections_abc", "_compat_pickle", "_compression",
    "_contextvars", "_csv", "_ctypes", "_curses", "_datetime", "_decimal",
    "_elementtree", "_functools", "_hashlib", "_heapq", "_imp", "_io",
    "_json", "_locale", "_lzma", "_markupbase", "_md5", "_multiprocessing",
    "_opcode", "_operator", "_osx_support", "_pickle", "_posixsubprocess",
    "_py_abc", "_pydecimal", "_pyio", "_queue", "_random", "_sha1",
    "_sha256", "_sha512", "_signal", "_socket", "_sqlite3", "_sre", "_ssl",
    "_stat", "_string", "_strptime", "_struct", "_thread",
    "_threading_local", "_tkinter", "_tracemalloc", "_warnings", "_weakref",
    "_weakrefset", "_winapi", "_zoneinfo",
)


class StdlibRegistry:
    """
    Неизменяемое множество имён стандартной библиотеки.

    Создаётся один раз до запуска воркеров и передаётся по ссылке;
    методов на изменение нет.
    """

    __slots__ = ("_names", "version")

    def __init__(self, names: Iterable[str], version: str = PINNED_VERSION):
        self._names: FrozenSet[str] = frozenset(names)
        self.version = version

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    @property
    def names(self) -> FrozenSet[str]:
        return self._names

    def __repr__(self) -> str:
        return f"StdlibRegistry(version={self.version!r}, size={len(self._names)})"


STANDARD_LIBRARY = StdlibRegistry(_PUBLIC + _PRIVATE)

__all__ = ["StdlibRegistry", "STANDARD_LIBRARY", "PINNED_VERSION"]
