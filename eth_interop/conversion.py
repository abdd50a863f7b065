"""Unit, hex, address and hashing helpers on the host ``utils`` object.

The first argument is anything carrying a ``utils`` member:
a host Web3 class or a web3 instance, e.g. web3.js reached through a JavaScript bridge.

.. code-block:: python

    from eth_interop import conversion

    assert conversion.to_wei(Web3, "1", "ether") == "1000000000000000000"
    assert conversion.hex_to_utf8(Web3, "0x49206861766520313030e282ac") == "I have 100€"

Big number handles (BN.js instances) are opaque.
They are passed to and returned from the host untouched.
"""

import enum
from typing import Any

from eth_typing import HexAddress, HexStr

from eth_interop.dispatch import call, get_property, invoke_raw, resolve, resolve_path


class EtherUnit(enum.Enum):
    """Unit names understood by ``toWei`` and ``fromWei``.

    Plain strings work too.
    """

    noether = "noether"
    wei = "wei"
    kwei = "kwei"
    babbage = "babbage"
    femtoether = "femtoether"
    mwei = "mwei"
    lovelace = "lovelace"
    picoether = "picoether"
    gwei = "gwei"
    shannon = "shannon"
    nanoether = "nanoether"
    nano = "nano"
    szabo = "szabo"
    microether = "microether"
    micro = "micro"
    finney = "finney"
    milliether = "milliether"
    milli = "milli"
    ether = "ether"
    kether = "kether"
    grand = "grand"
    mether = "mether"
    gether = "gether"
    tether = "tether"


def utils(web3) -> Any:
    """Gets the utils object from the host."""
    return resolve(web3, "utils")


def _unit_name(unit: str | enum.Enum) -> str:
    if isinstance(unit, enum.Enum):
        return unit.value
    assert type(unit) == str, f"Unit must be str or EtherUnit, got {type(unit)}"
    return unit


def random_hex(web3, size: int) -> HexStr:
    """Returns a random hex string of `size` bytes, e.g. ``"0x6892ffc6"`` for 4."""
    return call(utils(web3), "random-hex", [size])


def bn(web3, mixed) -> Any:
    """Create a BN.js big number from a number, number string or hex string."""
    constructor = resolve_path(web3, "utils", "BN")
    assert constructor is not None, f"{web3} has no utils.BN"
    return constructor(mixed)


def is_bn(web3, value) -> bool:
    """Is the value a BN.js instance."""
    return invoke_raw(utils(web3), "isBN", value)


is_big_number = is_bn

#: Same as :py:func:`bn`
to_big_number = bn


def sha3(web3, string: str) -> HexStr | None:
    """Keccak-256 hash of the data.

    Returns None for values the host cannot hash, e.g. plain numbers.
    """
    return call(utils(web3), "sha3", [string])


keccak256 = sha3


def solidity_sha3(web3, *args) -> HexStr:
    """Hash arguments the same way Solidity would.

    Arguments are ABI encoded and tightly packed before hashing.
    Each argument is either autodetected or a typed value mapping
    like ``{"type": "uint256", "value": "234"}`` or ``{"t": "bytes", "v": "0xfff456"}``.
    """
    return call(utils(web3), "solidity-sha3", args)


def is_hex(web3, value) -> bool:
    """Is the value a hex string. The 0x prefix is optional."""
    return call(utils(web3), "is-hex", [value])


def is_hex_strict(web3, value) -> bool:
    """Is the value a 0x prefixed hex string."""
    return call(utils(web3), "is-hex-strict", [value])


def is_address(web3, address: str) -> bool:
    """Is the string a valid address.

    All lowercase and all uppercase addresses are accepted as is,
    mixed case addresses must have a valid checksum.
    """
    return call(utils(web3), "is-address", [address])


def to_checksum_address(web3, address: str) -> HexAddress:
    """Convert an upper or lowercase address to a checksum address."""
    return call(utils(web3), "to-checksum-address", [address])


def check_address_checksum(web3, address: str) -> bool:
    """Is the checksum of a mixed case address valid."""
    return call(utils(web3), "check-address-checksum", [address])


def to_hex(web3, value) -> HexStr:
    """Hex representation of a string, number, mapping or big number."""
    return call(utils(web3), "to-hex", [value])


def to_bn(web3, number) -> Any:
    """Convert to BN.js big number. The result is not translated."""
    return invoke_raw(utils(web3), "toBN", number)


def hex_to_number_string(web3, value: HexStr) -> str:
    return call(utils(web3), "hex-to-number-string", [value])


def hex_to_number(web3, value: HexStr) -> int:
    return call(utils(web3), "hex-to-number", [value])


def number_to_hex(web3, number) -> HexStr:
    return call(utils(web3), "number-to-hex", [number])


def to_decimal(web3, hex_string: HexStr) -> int:
    """Number value of a hex string, e.g. ``"0x15"`` -> ``21``."""
    return call(utils(web3), "to-decimal", [hex_string])


def from_decimal(web3, number) -> HexStr:
    """Hex representation of a number or number string, e.g. ``21`` -> ``"0x15"``."""
    return call(utils(web3), "from-decimal", [number])


def hex_to_utf8(web3, value: HexStr) -> str:
    """UTF-8 string of a hex value, e.g. ``"0x49206861766520313030e282ac"`` -> ``"I have 100€"``."""
    return call(utils(web3), "hex-to-utf8", [value])


hex_to_string = hex_to_utf8


def hex_to_ascii(web3, value: HexStr) -> str:
    return call(utils(web3), "hex-to-ascii", [value])


def utf8_to_hex(web3, string: str) -> HexStr:
    """Hex representation of a UTF-8 string."""
    return call(utils(web3), "utf8-to-hex", [string])


string_to_hex = utf8_to_hex


def ascii_to_hex(web3, string: str) -> HexStr:
    """Hex representation of an ASCII string, e.g. ``"I have 100!"`` -> ``"0x4920686176652031303021"``."""
    return call(utils(web3), "ascii-to-hex", [string])


def hex_to_bytes(web3, value: HexStr) -> list[int]:
    """Byte list of a hex string, e.g. ``"0x000000ea"`` -> ``[0, 0, 0, 234]``."""
    return call(utils(web3), "hex-to-bytes", [value])


def bytes_to_hex(web3, byte_list: list[int]) -> HexStr:
    return call(utils(web3), "bytes-to-hex", [byte_list])


def to_wei(web3, number, unit: str | EtherUnit):
    """Convert an amount in `unit` to wei.

    :param number:
        Number string or big number

    :param unit:
        Unit name or :py:class:`EtherUnit`

    :return:
        Number string, or a big number if a big number was given
    """
    return call(utils(web3), "to-wei", [number, _unit_name(unit)])


def from_wei(web3, number, unit: str | EtherUnit):
    """Convert an amount of wei to `unit`.

    :return:
        Number string, or a big number if a big number was given
    """
    return call(utils(web3), "from-wei", [number, _unit_name(unit)])


def unit_map(web3) -> dict:
    """All unit names and their value in wei."""
    return get_property(web3, "utils", "unitMap")


def pad_left(web3, string: str, chars: int, sign: str | None = None) -> str:
    """Pad with zeroes, or `sign`, on the left to `chars` characters."""
    return call(utils(web3), "pad-left", [string, chars, sign])


left_pad = pad_left


def pad_right(web3, string: str, chars: int, sign: str | None = None) -> str:
    """Pad with zeroes, or `sign`, on the right to `chars` characters."""
    return call(utils(web3), "pad-right", [string, chars, sign])


right_pad = pad_right


def to_twos_complement(web3, number) -> HexStr:
    """Two's complement of a negative number as 32 bytes hex."""
    return call(utils(web3), "to-twos-complement", [number])
