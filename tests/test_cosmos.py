import base64

import pytest

from nftsale.cosmos import (
    Item,
    MessageInfo,
    ReplyOn,
    Response,
    Storage,
    SubMsg,
    WasmExecute,
    encode_instantiate_response,
    from_json,
    get_contract_version,
    parse_instantiate_response_data,
    set_contract_version,
    to_json_binary,
)
from nftsale.errors import NotFound, ParseError


def test_storage_set_get_remove():
    storage = Storage()
    assert storage.get("a") is None
    storage.set("a", b"1")
    assert storage.get("a") == b"1"
    assert storage.get(b"a") == b"1"
    storage.remove("a")
    assert storage.get("a") is None
    assert len(storage) == 0


def test_item_round_trip():
    storage = Storage()
    item = Item("config")
    item.save(storage, {"max_tokens": 1, "name": "SYNTH"})
    assert item.load(storage) == {"max_tokens": 1, "name": "SYNTH"}
    assert item.may_load(storage) == {"max_tokens": 1, "name": "SYNTH"}


def test_item_missing():
    storage = Storage()
    item = Item("config")
    assert item.may_load(storage) is None
    with pytest.raises(NotFound):
        item.load(storage)


def test_item_with_codec():
    storage = Storage()
    item = Item("pair", encode=list, decode=tuple)
    item.save(storage, (1, 2))
    assert item.load(storage) == (1, 2)


def test_json_round_trip_and_bytes():
    value = {"owner": "owner", "count": 3, "blob": b"\x00\x01"}
    decoded = from_json(to_json_binary(value))
    assert decoded["owner"] == "owner"
    assert decoded["count"] == 3
    assert base64.b64decode(decoded["blob"]) == b"\x00\x01"


def test_json_is_compact():
    assert to_json_binary({"a": 1}) == b'{"a":1}'


def test_from_json_invalid():
    with pytest.raises(ParseError):
        from_json(b"{not json")


def test_instantiate_response_round_trip_large_data():
    encoded = encode_instantiate_response("nftcontract", bytes([2]) * 32769)
    address, data = parse_instantiate_response_data(encoded)
    assert address == "nftcontract"
    assert data == bytes([2]) * 32769


def test_instantiate_response_wire_bytes():
    encoded = encode_instantiate_response("nftcontract", b"")
    assert encoded == b"\x0a\x0bnftcontract"
    assert parse_instantiate_response_data(encoded) == ("nftcontract", None)


def test_parse_empty():
    assert parse_instantiate_response_data(b"") == ("", None)


def test_parse_wrong_field():
    with pytest.raises(ParseError):
        parse_instantiate_response_data(encode_instantiate_response("", b"xyz"))


def test_parse_truncated():
    encoded = encode_instantiate_response("nftcontract", b"")
    with pytest.raises(ParseError):
        parse_instantiate_response_data(encoded[:-3])


def test_response_chaining():
    response = (
        Response()
        .add_attribute("action", "receive_nft")
        .add_attributes([("token_id", "test"), ("sender", "admin")])
        .set_data(b"abc")
    )
    assert response.attributes == [
        ("action", "receive_nft"),
        ("token_id", "test"),
        ("sender", "admin"),
    ]
    assert response.data == b"abc"


def test_add_message_wraps_in_submsg():
    msg = WasmExecute(contract_addr="nftcontract", msg=b"{}")
    response = Response().add_message(msg)
    assert response.messages == [SubMsg(msg=msg, id=0, reply_on=ReplyOn.NEVER)]


def test_add_submessages_keeps_order():
    first = SubMsg(msg="a", id=1, reply_on=ReplyOn.SUCCESS)
    second = SubMsg(msg="b")
    response = Response().add_submessages([first, second])
    assert response.messages == [first, second]


def test_message_info_defaults():
    info = MessageInfo(sender="owner")
    assert info.sender == "owner"
    assert info.funds == ()


def test_contract_version_round_trip():
    storage = Storage()
    set_contract_version(storage, "crates.io:cw721-fixed-price", "0.20.0")
    version = get_contract_version(storage)
    assert version["contract"] == "crates.io:cw721-fixed-price"
    assert version["version"] == "0.20.0"


def test_contract_version_missing():
    with pytest.raises(NotFound):
        get_contract_version(Storage())