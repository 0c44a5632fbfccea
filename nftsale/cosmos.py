"""A small contract runtime: storage, messages, responses and encodings."""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable

from nftsale.errors import NotFound, ParseError, StdError

_CONTRACT_INFO_KEY = "contract_info"
_VARINT_MAX_BYTES = 9


def _key_bytes(key: str | bytes) -> bytes:
    return key.encode("utf-8") if isinstance(key, str) else bytes(key)


class Storage:
    """An in-memory key/value store of bytes."""

    def __init__(self) -> None:
        self._data: dict[bytes, bytes] = {}

    def get(self, key: str | bytes) -> bytes | None:
        return self._data.get(_key_bytes(key))

    def set(self, key: str | bytes, value: bytes) -> None:
        self._data[_key_bytes(key)] = bytes(value)

    def remove(self, key: str | bytes) -> None:
        self._data.pop(_key_bytes(key), None)

    def __len__(self) -> int:
        return len(self._data)


class Item:
    """A single JSON-encoded value stored under a fixed key."""

    def __init__(
        self,
        namespace: str,
        encode: Callable[[Any], Any] | None = None,
        decode: Callable[[Any], Any] | None = None,
    ) -> None:
        self.namespace = namespace
        self._encode = encode
        self._decode = decode

    def save(self, storage: Storage, value: Any) -> None:
        data = self._encode(value) if self._encode else value
        storage.set(self.namespace, to_json_binary(data))

    def may_load(self, storage: Storage) -> Any:
        raw = storage.get(self.namespace)
        if raw is None:
            return None
        data = from_json(raw)
        return self._decode(data) if self._decode else data

    def load(self, storage: Storage) -> Any:
        raw = storage.get(self.namespace)
        if raw is None:
            raise NotFound(self.namespace)
        data = from_json(raw)
        return self._decode(data) if self._decode else data


@dataclass(frozen=True)
class MessageInfo:
    """Who sent a message and which funds came with it."""

    sender: str
    funds: tuple = ()


class ReplyOn(Enum):
    ALWAYS = "always"
    ERROR = "error"
    SUCCESS = "success"
    NEVER = "never"


@dataclass(frozen=True)
class WasmInstantiate:
    code_id: int
    msg: bytes
    label: str
    funds: tuple = ()
    admin: str | None = None


@dataclass(frozen=True)
class WasmExecute:
    contract_addr: str
    msg: bytes
    funds: tuple = ()


@dataclass(frozen=True)
class SubMsg:
    msg: Any
    id: int = 0
    gas_limit: int | None = None
    reply_on: ReplyOn = ReplyOn.NEVER
    payload: bytes = b""


@dataclass(frozen=True)
class MsgResponse:
    type_url: str
    value: bytes


@dataclass(frozen=True)
class Reply:
    """The outcome of a sub-message; ``error`` is set when it failed."""

    id: int
    msg_responses: tuple = ()
    error: str | None = None
    data: bytes | None = None
    payload: bytes = b""
    gas_used: int = 0


@dataclass
class Response:
    """What a contract entry point hands back to the runtime."""

    messages: list = field(default_factory=list)
    attributes: list = field(default_factory=list)
    data: bytes | None = None

    def add_attribute(self, key: str, value: Any) -> Response:
        self.attributes.append((str(key), str(value)))
        return self

    def add_attributes(self, attributes: Iterable[tuple[str, Any]]) -> Response:
        for key, value in attributes:
            self.add_attribute(key, value)
        return self

    def add_message(self, msg: Any) -> Response:
        self.messages.append(SubMsg(msg=msg))
        return self

    def add_submessages(self, msgs: Iterable[SubMsg]) -> Response:
        self.messages.extend(msgs)
        return self

    def set_data(self, data: bytes) -> Response:
        self.data = bytes(data)
        return self


def _json_default(obj: Any) -> Any:
    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    if isinstance(obj, Enum):
        return obj.value
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"cannot serialize {type(obj).__name__}")


def to_json_binary(value: Any) -> bytes:
    """Serialize a value to compact JSON bytes; bytes become base64 strings."""
    try:
        text = json.dumps(
            value, separators=(",", ":"), ensure_ascii=False, default=_json_default
        )
    except (TypeError, ValueError) as exc:
        raise StdError(f"Error serializing type: {exc}") from exc
    return text.encode("utf-8")


def from_json(data: bytes | str) -> Any:
    """Parse JSON bytes or text."""
    try:
        return json.loads(data)
    except (ValueError, UnicodeDecodeError) as exc:
        raise ParseError("json", str(exc)) from exc


def _encode_varint(number: int) -> bytes:
    out = bytearray()
    while True:
        byte = number & 0x7F
        number >>= 7
        if number:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _encode_field(field_number: int, value: bytes) -> bytes:
    if not value:
        return b""
    tag = (field_number << 3) | 2
    return _encode_varint(tag) + _encode_varint(len(value)) + value


def encode_instantiate_response(contract_address: str, data: bytes = b"") -> bytes:
    """Encode an instantiate response as its protobuf wire bytes."""
    return _encode_field(1, contract_address.encode("utf-8")) + _encode_field(2, bytes(data))


def _decode_varint(data: bytes, field_number: int) -> tuple[int, bytes]:
    number = 0
    for index, byte in enumerate(data[:_VARINT_MAX_BYTES]):
        number |= (byte & 0x7F) << (7 * index)
        if not byte & 0x80:
            return number, data[index + 1 :]
    raise ParseError(
        "MsgInstantiateContractResponse",
        f"failed to decode Protobuf message: field #{field_number}: invalid varint",
    )


def _read_length_prefixed(data: bytes, field_number: int) -> tuple[bytes, bytes]:
    if not data:
        return b"", b""
    wire_type = data[0] & 0b111
    found = data[0] >> 3
    if found != field_number:
        raise ParseError(
            "MsgInstantiateContractResponse",
            f"failed to decode Protobuf message: invalid field #{found} "
            f"for field #{field_number}",
        )
    if wire_type != 2:
        raise ParseError(
            "MsgInstantiateContractResponse",
            f"failed to decode Protobuf message: field #{field_number}: "
            f"invalid wire type {wire_type}",
        )
    length, rest = _decode_varint(data[1:], field_number)
    if len(rest) < length:
        raise ParseError(
            "MsgInstantiateContractResponse",
            f"failed to decode Protobuf message: field #{field_number}: message too short",
        )
    return rest[:length], rest[length:]


def parse_instantiate_response_data(data: bytes) -> tuple[str, bytes | None]:
    """Decode instantiate response bytes into ``(contract_address, data)``."""
    raw_address, rest = _read_length_prefixed(bytes(data), 1)
    try:
        address = raw_address.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError("MsgInstantiateContractResponse", str(exc)) from exc
    payload, _ = _read_length_prefixed(rest, 2)
    return address, (payload or None)


def set_contract_version(storage: Storage, name: str, version: str) -> None:
    """Record the contract's name and version in storage."""
    storage.set(_CONTRACT_INFO_KEY, to_json_binary({"contract": name, "version": version}))


def get_contract_version(storage: Storage) -> dict:
    """Return the stored ``{"contract": ..., "version": ...}`` record."""
    raw = storage.get(_CONTRACT_INFO_KEY)
    if raw is None:
        raise NotFound("ContractVersion")
    return from_json(raw)