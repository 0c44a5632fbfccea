"""A contract that accepts NFTs and succeeds or fails as the sender asks."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from enum import Enum

from nftsale.cosmos import MessageInfo, Response, from_json, to_json_binary
from nftsale.errors import ParseError, ReceiverFailed


class InnerMsg(Enum):
    """The message carried inside a received NFT: whether to accept it."""

    SUCCEED = "succeed"
    FAIL = "fail"

    def to_json(self) -> bytes:
        return to_json_binary(self.value)

    @classmethod
    def from_json(cls, data: bytes | str) -> InnerMsg:
        value = from_json(data)
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise ParseError(
            "InnerMsg", f"unknown variant {value!r}, expected `succeed` or `fail`"
        )


@dataclass(frozen=True)
class Cw721ReceiveMsg:
    """Notification that an NFT was sent to this contract."""

    sender: str
    token_id: str
    msg: bytes = b""

    def to_dict(self) -> dict:
        return {
            "sender": self.sender,
            "token_id": self.token_id,
            "msg": base64.b64encode(self.msg).decode("ascii"),
        }


@dataclass(frozen=True)
class InstantiateMsg:
    """The receiver takes no instantiation parameters."""


def instantiate(info: MessageInfo, msg: InstantiateMsg) -> Response:
    """Create the receiver; nothing is stored."""
    return Response()


def execute(info: MessageInfo, msg: Cw721ReceiveMsg) -> Response:
    """Accept or reject a received NFT according to its inner message."""
    inner = InnerMsg.from_json(msg.msg)
    if inner is InnerMsg.FAIL:
        raise ReceiverFailed()
    encoded = base64.b64encode(msg.msg).decode("ascii")
    return (
        Response()
        .add_attributes(
            [
                ("action", "receive_nft"),
                ("token_id", msg.token_id),
                ("sender", msg.sender),
                ("msg", encoded),
            ]
        )
        .set_data((msg.token_id + msg.sender + encoded).encode("utf-8"))
    )