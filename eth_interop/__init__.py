"""eth_interop package root.

Call a web3.js style client object (camelCase methods and result keys)
from Python using kebab-case keys and snake_case functions.

- :py:mod:`eth_interop.case` naming conversion

- :py:mod:`eth_interop.translate` nested value re-keying

- :py:mod:`eth_interop.dispatch` calling host methods by name

- :py:mod:`eth_interop.async_bridge` callbacks to :py:class:`asyncio.Queue` sinks

"""

import sys


#: Minimum required Python version to run this package
MIN_PYTHON_VERSION = (3, 10)


def _check_python_version():
    """Try early abort if the Python version is too old."""

    # Use Python tuple comparison for version numbers
    # https://stackoverflow.com/a/1093331/315168
    if sys.version_info < MIN_PYTHON_VERSION:
        raise RuntimeError(f"eth-interop needs Python {MIN_PYTHON_VERSION[0]}.{MIN_PYTHON_VERSION[1]} or later")


_check_python_version()
