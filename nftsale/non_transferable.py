"""Messages, state and queries of an NFT collection whose tokens cannot be moved."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from nftsale.cosmos import Item, Storage, from_json
from nftsale.errors import ParseError

_U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class InstantiateMsg:
    """Parameters of a new non-transferable collection."""

    name: str
    symbol: str
    admin: str | None = None
    collection_info_extension: Any = None
    minter: str | None = None
    creator: str | None = None
    withdraw_address: str | None = None


@dataclass(frozen=True)
class Config:
    """Stored state: the optional admin allowed to run every message."""

    admin: str | None = None


@dataclass(frozen=True)
class AdminResponse:
    admin: str | None

    def to_dict(self) -> dict:
        return {"admin": self.admin}


CONFIG = Item(
    "config",
    encode=lambda config: {"admin": config.admin},
    decode=lambda data: Config(admin=data.get("admin")),
)


class QueryKind(Enum):
    ADMIN = "admin"
    OWNER_OF = "owner_of"
    APPROVAL = "approval"
    APPROVALS = "approvals"
    ALL_OPERATORS = "all_operators"
    NUM_TOKENS = "num_tokens"
    CONTRACT_INFO = "contract_info"
    GET_COLLECTION_INFO_AND_EXTENSION = "get_collection_info_and_extension"
    MINTER = "minter"
    GET_MINTER_OWNERSHIP = "get_minter_ownership"
    GET_CREATOR_OWNERSHIP = "get_creator_ownership"
    NFT_INFO = "nft_info"
    ALL_NFT_INFO = "all_nft_info"
    TOKENS = "tokens"
    ALL_TOKENS = "all_tokens"
    GET_WITHDRAW_ADDRESS = "get_withdraw_address"


# (required fields, optional fields) of every query
_FIELDS: dict[QueryKind, tuple[tuple[str, ...], tuple[str, ...]]] = {
    QueryKind.ADMIN: ((), ()),
    QueryKind.OWNER_OF: (("token_id",), ("include_expired",)),
    QueryKind.APPROVAL: (("token_id", "spender"), ("include_expired",)),
    QueryKind.APPROVALS: (("token_id",), ("include_expired",)),
    QueryKind.ALL_OPERATORS: (("owner",), ("include_expired", "start_after", "limit")),
    QueryKind.NUM_TOKENS: ((), ()),
    QueryKind.CONTRACT_INFO: ((), ()),
    QueryKind.GET_COLLECTION_INFO_AND_EXTENSION: ((), ()),
    QueryKind.MINTER: ((), ()),
    QueryKind.GET_MINTER_OWNERSHIP: ((), ()),
    QueryKind.GET_CREATOR_OWNERSHIP: ((), ()),
    QueryKind.NFT_INFO: (("token_id",), ()),
    QueryKind.ALL_NFT_INFO: (("token_id",), ("include_expired",)),
    QueryKind.TOKENS: (("owner",), ("start_after", "limit")),
    QueryKind.ALL_TOKENS: ((), ("start_after", "limit")),
    QueryKind.GET_WITHDRAW_ADDRESS: ((), ()),
}

_ALL_FIELDS = ("token_id", "spender", "owner", "include_expired", "start_after", "limit")

_UNSUPPORTED = {
    QueryKind.ADMIN: "Admin is not supported!",
    QueryKind.ALL_OPERATORS: "AllOperators is not supported!",
    QueryKind.APPROVAL: "Approval is not supported!",
    QueryKind.APPROVALS: "Approvals is not supported!",
}


def _check_type(name: str, value: Any) -> None:
    if value is None:
        return
    if name == "include_expired":
        if not isinstance(value, bool):
            raise ValueError(f"invalid type for `{name}`: expected a boolean")
    elif name == "limit":
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U32_MAX:
            raise ValueError(f"invalid value for `{name}`: expected u32")
    elif not isinstance(value, str):
        raise ValueError(f"invalid type for `{name}`: expected a string")


@dataclass(frozen=True)
class QueryMsg:
    """A query to the collection; only the fields its kind takes may be set."""

    kind: QueryKind
    token_id: str | None = None
    spender: str | None = None
    owner: str | None = None
    include_expired: bool | None = None
    start_after: str | None = None
    limit: int | None = None

    def __post_init__(self) -> None:
        required, optional = _FIELDS[self.kind]
        allowed = set(required) | set(optional)
        for name in _ALL_FIELDS:
            value = getattr(self, name)
            if name in required and value is None:
                raise ValueError(f"missing field `{name}` for {self.kind.value}")
            if name not in allowed and value is not None:
                raise ValueError(f"unknown field `{name}` for {self.kind.value}")
            _check_type(name, value)

    def _fields_dict(self, kind: QueryKind) -> dict:
        required, optional = _FIELDS[kind]
        return {name: getattr(self, name) for name in required + optional}

    def to_dict(self) -> dict:
        return {self.kind.value: self._fields_dict(self.kind)}

    def to_cw721(self) -> dict:
        """Return the equivalent query of the underlying cw721 collection."""
        if self.kind in _UNSUPPORTED:
            raise ValueError(_UNSUPPORTED[self.kind])
        target = (
            QueryKind.GET_COLLECTION_INFO_AND_EXTENSION
            if self.kind is QueryKind.CONTRACT_INFO
            else self.kind
        )
        return {target.value: self._fields_dict(target)}

    @classmethod
    def from_json(cls, data: bytes | str) -> QueryMsg:
        value = from_json(data)
        if not isinstance(value, dict) or len(value) != 1:
            raise ParseError("QueryMsg", "expected an object with exactly one variant")
        ((name, body),) = value.items()
        try:
            kind = QueryKind(name)
        except ValueError:
            raise ParseError("QueryMsg", f"unknown variant `{name}`") from None
        if not isinstance(body, dict):
            raise ParseError("QueryMsg", f"expected an object for `{name}`")
        required, optional = _FIELDS[kind]
        unknown = set(body) - set(required) - set(optional)
        if unknown:
            raise ParseError("QueryMsg", f"unknown field `{sorted(unknown)[0]}`")
        try:
            return cls(kind, **body)
        except ValueError as exc:
            raise ParseError("QueryMsg", str(exc)) from exc


def save_config(storage: Storage, config: Config) -> None:
    """Store the collection's configuration."""
    CONFIG.save(storage, config)


def admin(storage: Storage) -> AdminResponse:
    """Return the configured admin, if any."""
    config: Config = CONFIG.load(storage)
    return AdminResponse(admin=config.admin)