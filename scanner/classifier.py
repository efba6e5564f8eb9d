"""Classification of import specifiers as local, builtin or external."""

from graph.model import BUILTIN, EXTERNAL, LOCAL


NODE_BUILTINS = frozenset({
    "assert", "async_hooks", "buffer", "child_process", "cluster", "console",
    "constants", "crypto", "dgram", "diagnostics_channel", "dns", "domain",
    "events", "fs", "http", "http2", "https", "inspector", "module", "net",
    "os", "path", "perf_hooks", "process", "punycode", "querystring",
    "readline", "repl", "stream", "string_decoder", "sys", "test", "timers",
    "tls", "trace_events", "tty", "url", "util", "v8", "vm", "wasi",
    "worker_threads", "zlib",
})

PYTHON_STDLIB = frozenset({
    "__future__", "_thread", "abc", "argparse", "array", "ast", "asyncio",
    "atexit", "base64", "binascii", "bisect", "builtins", "bz2", "calendar",
    "cmath", "codecs", "collections", "colorsys", "concurrent",
    "configparser", "contextlib", "contextvars", "copy", "copyreg", "csv",
    "ctypes", "dataclasses", "datetime", "dbm", "decimal", "difflib", "dis",
    "doctest", "email", "encodings", "enum", "errno", "faulthandler",
    "fcntl", "filecmp", "fileinput", "fnmatch", "fractions", "ftplib",
    "functools", "gc", "getopt", "getpass", "gettext", "glob", "graphlib",
    "grp", "gzip", "hashlib", "heapq", "hmac", "html", "http", "imaplib",
    "importlib", "inspect", "io", "ipaddress", "itertools", "json",
    "keyword", "linecache", "locale", "logging", "lzma", "mailbox", "marshal",
    "math", "mimetypes", "mmap", "multiprocessing", "numbers", "operator",
    "os", "pathlib", "pdb", "pickle", "pkgutil", "platform", "plistlib",
    "poplib", "posixpath", "pprint", "profile", "pstats", "pty", "pwd",
    "queue", "quopri", "random", "re", "readline", "reprlib", "resource",
    "runpy", "sched", "secrets", "select", "selectors", "shelve", "shlex",
    "shutil", "signal", "site", "smtplib", "socket", "socketserver",
    "sqlite3", "ssl", "stat", "statistics", "string", "stringprep", "struct",
    "subprocess", "symtable", "sys", "sysconfig", "syslog", "tarfile",
    "tempfile", "termios", "textwrap", "threading", "time", "timeit",
    "tkinter", "token", "tokenize", "tomllib", "trace", "traceback",
    "tracemalloc", "tty", "turtle", "types", "typing", "unicodedata",
    "unittest", "urllib", "uuid", "venv", "warnings", "wave", "weakref",
    "webbrowser", "winreg", "wsgiref", "xml", "xmlrpc", "zipapp", "zipfile",
    "zipimport", "zlib", "zoneinfo",
})


def classify_javascript(specifier: str) -> str:
    """
    Classify a JavaScript/TypeScript module specifier.

    Relative (`./`, `../`) and rooted (`/`) paths are local. The `node:`
    scheme and names whose first path segment is a Node core module are
    builtin. Everything else, scoped `@scope/name` packages included, is
    external.
    """
    if specifier.startswith((".", "/")):
        return LOCAL
    if specifier.startswith("@"):
        return EXTERNAL
    if specifier.startswith("node:"):
        return BUILTIN
    if specifier.split("/", 1)[0] in NODE_BUILTINS:
        return BUILTIN
    return EXTERNAL


def classify_python(specifier: str) -> str:
    """
    Classify a Python module name.

    Any number of leading dots marks a relative import, which is local. The
    first dotted segment decides builtin versus external.
    """
    if specifier.startswith("."):
        return LOCAL
    if specifier.split(".", 1)[0] in PYTHON_STDLIB:
        return BUILTIN
    return EXTERNAL
