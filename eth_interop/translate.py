"""Re-key nested values passed between Python and the host object.

- Mapping keys are re-cased with :py:mod:`eth_interop.case`

- Lists and tuples are walked element by element, order and type preserved

- Everything else is a leaf and returned as is. This includes strings,
  :py:class:`hexbytes.HexBytes`, numbers and opaque host handles like
  big number instances, which we never look inside.

Results coming from web3.py are often :py:class:`web3.datastructures.AttributeDict`.
These are mappings and come out as plain dicts.
"""

import functools
from collections.abc import Mapping
from typing import Any, Callable, Iterable

from eth_interop.case import camel_case, is_host_key, is_wrapper_key, kebab_case


#: Host callback convention: ``callback(error, result)``
CompletionCallback = Callable[[Any, Any], Any]


def transform_keys(value: Any, key_func: Callable[[str], str], key_filter: Callable[[Any], bool]) -> Any:
    """Recursively apply `key_func` to all mapping keys.

    :param value:
        Any nested structure

    :param key_func:
        Key converter

    :param key_filter:
        Keys failing this check are kept as is

    :return:
        New structure, input is not modified
    """
    if isinstance(value, Mapping):
        return {(key_func(k) if key_filter(k) else k): transform_keys(v, key_func, key_filter) for k, v in value.items()}
    elif isinstance(value, list):
        return [transform_keys(v, key_func, key_filter) for v in value]
    elif isinstance(value, tuple):
        return tuple(transform_keys(v, key_func, key_filter) for v in value)
    return value


def host_to_wrapper(value: Any) -> Any:
    """Translate a value returned by the host, e.g. `blockNumber` -> `block-number`."""
    return transform_keys(value, kebab_case, is_host_key)


def wrapper_to_host(value: Any) -> Any:
    """Translate a value going to the host, e.g. `block-number` -> `blockNumber`."""
    return transform_keys(value, camel_case, is_wrapper_key)


def is_completion_callback(value: Any) -> bool:
    """Is this argument a function the host will call back.

    Classes are callable too, but they are constructors, not callbacks.
    """
    return callable(value) and not isinstance(value, type)


def wrap_callback(callback: CompletionCallback) -> CompletionCallback:
    """Translate the result slot before the caller sees it.

    The error slot is passed verbatim. The host may call us
    without a result, or with a `None` result.
    """

    @functools.wraps(callback)
    def _wrapped(err=None, res=None):
        return callback(err, host_to_wrapper(res))

    return _wrapped


def arg_to_host(arg: Any) -> Any:
    """Translate one positional argument going to the host."""
    if is_completion_callback(arg):
        return wrap_callback(arg)
    return wrapper_to_host(arg)


def args_to_host(args: Iterable[Any] | None) -> list:
    """Translate a positional argument list going to the host."""
    if not args:
        return []
    return [arg_to_host(a) for a in args]
