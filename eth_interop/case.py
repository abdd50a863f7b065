"""Identifier case conversion between the host and the wrapper conventions.

The host object (web3.js and friends) names its methods and result keys
in `camelCase`. On the Python side we use `kebab-case` strings.

The conversion leaves the first character of a name untouched and only
re-cases the remainder. This keeps names like ``_jsonInterface``,
``0x...`` prefixed values or the ``Kwei`` unit intact.

Example:

.. code-block:: python

    from eth_interop.case import camel_case, kebab_case

    assert kebab_case("blockNumber") == "block-number"
    assert camel_case("block-number") == "blockNumber"
    assert camel_case("gas_price") == "gas_price"

"""

import enum
import re
from typing import Callable

import inflection

#: Stands in for underscores while the case transform runs,
#: so that literal underscores survive in both directions
UNDERSCORE_SENTINEL = "*"

#: Keys which look like camelCase identifiers
HOST_KEY_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

#: Keys which look like kebab-case identifiers
WRAPPER_KEY_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(-[A-Za-z0-9_]+)*$")


class TranslationError(ValueError):
    """Name cannot be converted.

    Raised instead of producing a mangled name that would later fail
    as a confusing method lookup error.
    """


def _name(x: str | enum.Enum) -> str:
    if isinstance(x, enum.Enum):
        x = x.value

    if not isinstance(x, str):
        raise TranslationError(f"Expected a string name, got {type(x)}: {x!r}")

    if not x:
        raise TranslationError("Cannot convert the case of an empty name")

    if WRAPPER_KEY_PATTERN.match(x) is None:
        raise TranslationError(f"Not a camelCase or kebab-case identifier: {x!r}")

    return x


def safe_case(case_func: Callable[[str], str]) -> Callable[[str | enum.Enum], str]:
    """Create a case converter that does not touch the first character.

    - Strip the first character

    - Swap underscores to :py:data:`UNDERSCORE_SENTINEL`

    - Run `case_func` on the rest

    - Restore underscores and put the first character back

    :param case_func:
        Function re-casing the remainder of the name.

    :return:
        Converter function raising :py:class:`TranslationError` on empty
        or malformed names
    """

    def _convert(x: str | enum.Enum) -> str:
        name = _name(x)
        head, rest = name[0], name[1:]
        rest = rest.replace("_", UNDERSCORE_SENTINEL)
        rest = case_func(rest)
        rest = rest.replace(UNDERSCORE_SENTINEL, "_")
        return head + rest

    return _convert


def _to_camel(s: str) -> str:
    words = [inflection.camelize(inflection.underscore(w)) for w in s.split("-")]
    head = words[0][:1].lower() + words[0][1:]
    return head + "".join(words[1:])


def _to_kebab(s: str) -> str:
    return inflection.dasherize(inflection.underscore(s))


#: Wrapper name to host name, e.g. `get-balance` -> `getBalance`
camel_case = safe_case(_to_camel)

#: Host name to wrapper name, e.g. `getBalance` -> `get-balance`
kebab_case = safe_case(_to_kebab)


def pascal_case(x: str | enum.Enum) -> str:
    """Convert a name to PascalCase, e.g. `node` -> `Node`.

    Used to build getter method names like ``getNode``.
    """
    return inflection.camelize(inflection.underscore(_name(x)))


def is_host_key(key) -> bool:
    """Does the key look like a camelCase identifier we can re-case."""
    return isinstance(key, str) and HOST_KEY_PATTERN.match(key) is not None


def is_wrapper_key(key) -> bool:
    """Does the key look like a kebab-case identifier we can re-case."""
    return isinstance(key, str) and WRAPPER_KEY_PATTERN.match(key) is not None
