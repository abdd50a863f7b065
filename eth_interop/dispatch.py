"""Call methods and read properties on the host object by name.

All string based lookups on the host object go through :py:func:`resolve`.
Everything else in the package uses the functions here.

Example:

.. code-block:: python

    from eth_interop.dispatch import call

    # Calls web3.eth.getBlock("latest", callback)
    def on_block(err, block):
        print(block["state-root"])

    call(web3.eth, "get-block", ["latest", on_block])

"""

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Iterable, Optional

from eth_interop.case import camel_case, pascal_case
from eth_interop.translate import (
    CompletionCallback,
    args_to_host,
    host_to_wrapper,
    is_completion_callback,
    wrapper_to_host,
)

logger = logging.getLogger(__name__)


class MethodNotFound(LookupError):
    """The host object does not have the method or property we tried to call."""


def resolve(obj: Any, name: str) -> Optional[Any]:
    """Look up a host method or property by its host name.

    - Item access first for mapping-like host objects, so keys like
      `values` or `get` are not shadowed by dict methods

    - Attributes otherwise, as host proxies expose their members this way

    :param obj:
        Host object

    :param name:
        camelCase name as the host knows it

    :return:
        Method or property value, or ``None`` if the host does not have it
    """
    assert type(name) == str, f"Expected str name, got {type(name)}: {name}"

    if obj is None:
        return None

    if isinstance(obj, Mapping):
        value = obj.get(name)
        if value is not None:
            return value

    return getattr(obj, name, None)


def resolve_path(obj: Any, *path: str) -> Optional[Any]:
    """Walk a chain of properties, e.g. ``resolve_path(web3, "version", "node")``.

    Names are host names as is, e.g. ``"defaultAccount"`` or ``"BatchRequest"``.
    Nothing is translated.

    :return:
        The last value in the path or ``None`` if any step is missing
    """
    for key in path:
        obj = resolve(obj, key)
        if obj is None:
            return None
    return obj


def call(obj: Any, name: str, args: Optional[Iterable[Any]] = None) -> Any:
    """Call a host method with translated arguments and result.

    - Convert `name` to camelCase and look it up

    - If it is a method, translate arguments to the host, wrap any completion
      callbacks so they see translated results, and invoke

    - If it is a plain property, read it and ignore `args`

    :param obj:
        Host object, e.g. ``web3.eth``

    :param name:
        Method name in either kebab-case or camelCase

    :param args:
        Positional arguments

    :return:
        Result with keys translated to kebab-case

    :raise MethodNotFound:
        The host does not have such a member
    """
    method_name = camel_case(name)
    target = resolve(obj, method_name)
    if target is None:
        raise MethodNotFound(f"Method: {method_name} was not found in object {type(obj).__name__}")

    if not callable(target):
        return host_to_wrapper(target)

    host_args = args_to_host(args)
    logger.debug("Calling host %s.%s() with %d arguments", type(obj).__name__, method_name, len(host_args))
    return host_to_wrapper(target(*host_args))


def invoke_raw(obj: Any, name: str, *args) -> Any:
    """Call a host method by its host name without any translation.

    For methods taking or returning opaque handles, like big numbers.

    :raise MethodNotFound:
        The host does not have such a method
    """
    target = resolve(obj, name)
    if target is None:
        raise MethodNotFound(f"Method: {name} was not found in object {type(obj).__name__}")
    return target(*args)


def call_with_callback(obj: Any, name: str, args: Optional[Iterable[Any]], callback: CompletionCallback) -> Any:
    """Call a host method that reports completion through ``callback(error, result)``.

    The callback is appended as the last positional argument
    and receives a translated result.

    :return:
        Whatever the host method returned synchronously, translated
    """
    assert is_completion_callback(callback), f"Expected a callback function, got {callback}"
    return call(obj, name, [*(args or []), callback])


def get_property(obj: Any, *path: str) -> Any:
    """Read a property chain and translate the value for Python.

    :return:
        Translated value or ``None`` if the property is not set
    """
    return host_to_wrapper(resolve_path(obj, *path))


def set_property(obj: Any, name: str, value: Any):
    """Set a host property, e.g. ``web3.eth.defaultAccount``.

    :param name:
        Host name of the property

    :param value:
        Translated to the host convention before setting
    """
    host_value = wrapper_to_host(value)
    if isinstance(obj, MutableMapping) and not hasattr(obj, name):
        obj[name] = host_value
    else:
        setattr(obj, name, host_value)


def property_or_callback(*path: str) -> Callable:
    """Create an accessor for values that are both properties and async getters.

    The created function takes the host object and optional arguments.

    - If the first argument is a callback, call ``get<Last>`` on the parent
      object with all arguments, e.g. ``web3.version.getNode(callback)``

    - Otherwise read the property chain, e.g. ``web3.version.node``

    :param path:
        Property chain below the host object

    :return:
        Accessor function
    """
    assert len(path) > 0, "Need at least one property name"

    def _accessor(web3, *args):
        if args and is_completion_callback(args[0]):
            parent = resolve_path(web3, *path[:-1])
            return call(parent, "get" + pascal_case(path[-1]), args)
        return get_property(web3, *path)

    return _accessor
