import base64

import pytest

from nftsale.cosmos import MessageInfo, to_json_binary
from nftsale.errors import ParseError, ReceiverFailed
from nftsale.receiver import (
    Cw721ReceiveMsg,
    InnerMsg,
    InstantiateMsg,
    execute,
    instantiate,
)

INFO = MessageInfo(sender="nft_contract")


def test_inner_msg_json():
    json = InnerMsg.SUCCEED.to_json()
    assert json == b'"succeed"'
    assert InnerMsg.from_json(json) is InnerMsg.SUCCEED


def test_inner_msg_fail_round_trip():
    assert InnerMsg.from_json(InnerMsg.FAIL.to_json()) is InnerMsg.FAIL


@pytest.mark.parametrize("raw", [b'{"invalid": "fields"}', b'"other"', b"not json", b"1"])
def test_inner_msg_rejects_bad_input(raw):
    with pytest.raises(ParseError):
        InnerMsg.from_json(raw)


def test_instantiate_returns_empty_response():
    res = instantiate(INFO, InstantiateMsg())
    assert res.messages == []
    assert res.attributes == []
    assert res.data is None


def test_receive_succeed():
    inner = InnerMsg.SUCCEED.to_json()
    msg = Cw721ReceiveMsg(sender="admin", token_id="test", msg=inner)
    res = execute(INFO, msg)
    encoded = base64.b64encode(inner).decode("ascii")
    attrs = dict(res.attributes)
    assert attrs["action"] == "receive_nft"
    assert attrs["token_id"] == "test"
    assert attrs["sender"] == "admin"
    assert attrs["msg"] == encoded
    assert [key for key, _ in res.attributes] == ["action", "token_id", "sender", "msg"]
    assert res.data == ("test" + "admin" + encoded).encode("utf-8")
    assert res.messages == []


def test_receive_fail():
    msg = Cw721ReceiveMsg(sender="admin", token_id="test", msg=to_json_binary("fail"))
    with pytest.raises(ReceiverFailed) as excinfo:
        execute(INFO, msg)
    assert str(excinfo.value) == "I failed because you asked me to do so"


def test_receive_incorrect_message():
    msg = Cw721ReceiveMsg(sender="admin", token_id="test", msg=b'{"invalid": "fields"}')
    with pytest.raises(ParseError):
        execute(INFO, msg)


def test_receive_msg_to_dict_encodes_bytes():
    msg = Cw721ReceiveMsg(sender="admin", token_id="test", msg=b'"succeed"')
    data = msg.to_dict()
    assert base64.b64decode(data["msg"]) == b'"succeed"'
    assert data["sender"] == "admin"
    assert data["token_id"] == "test"