"""pkgfront: command-dispatch front end for the ``pkg`` package tool.

Resolves the first command-line token to a subcommand (exact name or
unambiguous prefix) and renders lifecycle events reported by the
package library while that subcommand runs.
"""

from pkgfront.core.handle import PackageHandle, current_handle
from pkgfront.version import __version__

__all__: list[str] = ["PackageHandle", "__version__", "current_handle"]
