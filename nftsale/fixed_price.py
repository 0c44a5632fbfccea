"""A sale contract that mints one NFT for every payment of a fixed cw20 price."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from nftsale.cosmos import (
    Item,
    MessageInfo,
    Reply,
    ReplyOn,
    Response,
    Storage,
    SubMsg,
    WasmExecute,
    WasmInstantiate,
    parse_instantiate_response_data,
    set_contract_version,
    to_json_binary,
)
from nftsale.errors import (
    Cw721AlreadyLinked,
    Cw721NotLinked,
    InvalidMaxTokens,
    InvalidTokenReplyId,
    InvalidUnitPrice,
    ParseError,
    SoldOut,
    StdError,
    UnauthorizedTokenContract,
    Uninitialized,
    WrongPaymentAmount,
)

CONTRACT_NAME = "crates.io:cw721-fixed-price"
CONTRACT_VERSION = "0.20.0"

INSTANTIATE_TOKEN_REPLY_ID = 1
INSTANTIATE_LABEL = "Instantiate fixed price NFT contract"


@dataclass(frozen=True)
class InstantiateMsg:
    """Parameters of a new sale; the NFT contract is created from ``token_code_id``."""

    owner: str
    max_tokens: int
    unit_price: int
    name: str
    symbol: str
    token_code_id: int
    cw20_address: str
    token_uri: str
    collection_info_extension: Any = None
    extension: dict | None = None
    withdraw_address: str | None = None


@dataclass(frozen=True)
class Cw20ReceiveMsg:
    """A cw20 transfer forwarded to this contract by the token contract."""

    sender: str
    amount: int
    msg: bytes = b""


@dataclass(frozen=True)
class GetConfig:
    """Query for the sale's configuration."""


@dataclass
class Config:
    """The sale's stored state."""

    owner: str
    cw20_address: str
    cw721_address: str | None
    max_tokens: int
    unit_price: int
    name: str
    symbol: str
    token_uri: str
    extension: dict | None
    unused_token_id: int

    def to_dict(self) -> dict:
        return {
            "owner": self.owner,
            "cw20_address": self.cw20_address,
            "cw721_address": self.cw721_address,
            "max_tokens": self.max_tokens,
            "unit_price": str(self.unit_price),
            "name": self.name,
            "symbol": self.symbol,
            "token_uri": self.token_uri,
            "extension": self.extension,
            "unused_token_id": self.unused_token_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Config:
        try:
            return cls(
                owner=data["owner"],
                cw20_address=data["cw20_address"],
                cw721_address=data.get("cw721_address"),
                max_tokens=int(data["max_tokens"]),
                unit_price=int(data["unit_price"]),
                name=data["name"],
                symbol=data["symbol"],
                token_uri=data["token_uri"],
                extension=data.get("extension"),
                unused_token_id=int(data["unused_token_id"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise ParseError("Config", str(exc)) from exc


CONFIG = Item("config", encode=Config.to_dict, decode=Config.from_dict)


def instantiate(storage: Storage, info: MessageInfo, msg: InstantiateMsg) -> Response:
    """Store the sale's configuration and ask for the NFT contract to be created."""
    set_contract_version(storage, CONTRACT_NAME, CONTRACT_VERSION)

    if msg.unit_price == 0:
        raise InvalidUnitPrice()
    if msg.max_tokens == 0:
        raise InvalidMaxTokens()

    config = Config(
        owner=info.sender,
        cw20_address=msg.cw20_address,
        cw721_address=None,
        max_tokens=msg.max_tokens,
        unit_price=msg.unit_price,
        name=msg.name,
        symbol=msg.symbol,
        token_uri=msg.token_uri,
        extension=msg.extension,
        unused_token_id=0,
    )
    CONFIG.save(storage, config)

    cw721_init = {
        "name": msg.name,
        "symbol": msg.symbol,
        "collection_info_extension": msg.collection_info_extension,
        "minter": None,
        "creator": None,
        "withdraw_address": msg.withdraw_address,
    }
    sub_msg = SubMsg(
        msg=WasmInstantiate(
            code_id=msg.token_code_id,
            msg=to_json_binary(cw721_init),
            label=INSTANTIATE_LABEL,
        ),
        id=INSTANTIATE_TOKEN_REPLY_ID,
        reply_on=ReplyOn.SUCCESS,
    )
    return Response().add_submessages([sub_msg])


def reply(storage: Storage, msg: Reply) -> Response:
    """Link the newly created NFT contract to the sale."""
    config: Config = CONFIG.load(storage)

    if config.cw721_address is not None:
        raise Cw721AlreadyLinked()
    if msg.id != INSTANTIATE_TOKEN_REPLY_ID:
        raise InvalidTokenReplyId()
    if msg.error is not None:
        raise StdError(f"NFT contract instantiation failed: {msg.error}")
    if not msg.msg_responses:
        raise StdError("NFT contract instantiation returned no message response")

    address, _ = parse_instantiate_response_data(msg.msg_responses[0].value)
    config.cw721_address = address
    CONFIG.save(storage, config)
    return Response()


def query_config(storage: Storage) -> Config:
    """Return the stored configuration."""
    return CONFIG.load(storage)


def query(storage: Storage, msg: Any) -> bytes:
    """Answer a query with JSON bytes."""
    if isinstance(msg, GetConfig):
        return to_json_binary(query_config(storage))
    raise StdError(f"unknown query: {msg!r}")


def execute(storage: Storage, info: MessageInfo, msg: Any) -> Response:
    """Dispatch an execute message."""
    if isinstance(msg, Cw20ReceiveMsg):
        return execute_receive(storage, info, msg.sender, msg.amount, msg.msg)
    raise StdError(f"unknown execute message: {msg!r}")


def execute_receive(
    storage: Storage, info: MessageInfo, sender: str, amount: int, msg: bytes
) -> Response:
    """Mint the next token to ``sender`` once the exact price has been paid."""
    config: Config = CONFIG.load(storage)

    if config.cw20_address != info.sender:
        raise UnauthorizedTokenContract()
    if config.cw721_address is None:
        raise Uninitialized()
    if config.unused_token_id >= config.max_tokens:
        raise SoldOut()
    if amount != config.unit_price:
        raise WrongPaymentAmount()

    cw721 = config.cw721_address
    if cw721 is None:
        raise Cw721NotLinked()

    mint_msg = {
        "mint": {
            "token_id": str(config.unused_token_id),
            "owner": sender,
            "token_uri": config.token_uri,
            "extension": dict(config.extension) if config.extension is not None else None,
        }
    }
    wasm_msg = WasmExecute(contract_addr=cw721, msg=to_json_binary(mint_msg))
    config.unused_token_id += 1
    CONFIG.save(storage, config)
    return Response().add_message(wasm_msg)