# nftsale

Contract logic for selling NFTs at a fixed cw20 price, for receiving NFTs, and
for the messages and admin query of a non-transferable collection. Everything
runs as plain Python over an in-memory key/value store. Each entry point takes a
`Storage`, usually the sender's `MessageInfo`, and a message. It returns a
`Response` or raises a `ContractError`.

## Install

```
pip install .
pip install ".[test]"   # adds pytest, to run the test suite
```

The package has no dependencies outside the standard library.

## Modules

- `nftsale.cosmos` holds the runtime pieces.
  - `Storage` is a bytes key/value store with `get`, `set` and `remove`.
  - `Item` is a single JSON value under a fixed key, with `save`, `load` and `may_load`. `load` raises `NotFound` when the value is absent.
  - The message and response types are `MessageInfo`, `Response`, `SubMsg`, `ReplyOn`, `WasmInstantiate`, `WasmExecute`, `Reply` and `MsgResponse`. `Response` has `add_attribute`, `add_attributes`, `add_message`, `add_submessages` and `set_data`.
  - `to_json_binary` writes compact JSON bytes, with bytes as base64. `from_json` parses JSON and raises `ParseError` on bad input.
  - `encode_instantiate_response` and `parse_instantiate_response_data` encode and decode the protobuf bytes of an instantiate response.
  - `set_contract_version` and `get_contract_version` store and read a `{"contract": ..., "version": ...}` record.
- `nftsale.errors` defines `ContractError` and its subclasses.
  - Storage errors: `StdError`, `NotFound` and `ParseError`.
  - Sale errors: `Unauthorized`, `InvalidUnitPrice`, `InvalidMaxTokens`, `SoldOut`, `UnauthorizedTokenContract`, `Uninitialized`, `WrongPaymentAmount`, `InvalidTokenReplyId`, `Cw721NotLinked` and `Cw721AlreadyLinked`.
  - Receiver error: `ReceiverFailed`.
- `nftsale.fixed_price` is the sale contract.
  - Messages: `InstantiateMsg`, `Cw20ReceiveMsg` and `GetConfig`.
  - State: `Config`, with `to_dict` and `from_dict`.
  - Entry points: `instantiate`, `reply`, `execute`, `execute_receive`, `query` and `query_config`.
- `nftsale.receiver` is a contract that accepts or rejects an incoming NFT.
  - The inner message is `InnerMsg.SUCCEED` or `InnerMsg.FAIL`, serialized as `"succeed"` or `"fail"`.
  - The entry points are `instantiate` and `execute`, which take a `Cw721ReceiveMsg`.
- `nftsale.non_transferable` covers a collection whose tokens cannot be moved.
  - `InstantiateMsg` and `Config` describe the collection.
  - `save_config` stores the config, and `admin` returns an `AdminResponse`.
  - `QueryMsg` and `QueryKind` describe a query. `QueryMsg.from_json` parses one. `QueryMsg.to_cw721` turns it into the equivalent collection query, with `contract_info` mapped to `get_collection_info_and_extension`. It raises `ValueError` for `admin`, `approval`, `approvals` and `all_operators`.

## Fixed-price sale

```python
from nftsale.cosmos import (
    MessageInfo, MsgResponse, Reply, Storage, encode_instantiate_response,
)
from nftsale.fixed_price import (
    Cw20ReceiveMsg, InstantiateMsg, execute, instantiate, query_config, reply,
)

storage = Storage()
instantiate(
    storage,
    MessageInfo(sender="owner"),
    InstantiateMsg(
        owner="owner",
        max_tokens=1,
        unit_price=1,
        name="SYNTH",
        symbol="SYNTH",
        token_code_id=10,
        cw20_address="cw20",
        token_uri="https://ipfs.io/ipfs/Q",
    ),
)

# link the NFT contract once it reports its address
data = encode_instantiate_response("nftcontract", b"")
reply(storage, Reply(id=1, msg_responses=[MsgResponse(
    type_url="/cosmwasm.wasm.v1.MsgInstantiateContractResponse", value=data)]))

# a cw20 transfer of exactly the unit price mints token "0"
response = execute(
    storage,
    MessageInfo(sender="cw20"),
    Cw20ReceiveMsg(sender="buyer", amount=1, msg=b""),
)
print(query_config(storage).unused_token_id)  # 1
```

### Errors

- `instantiate` rejects a zero price with `InvalidUnitPrice` and a zero `max_tokens` with `InvalidMaxTokens`.
- `reply` raises `InvalidTokenReplyId` for any reply id other than 1. It raises `Cw721AlreadyLinked` once an NFT contract is linked.
- A payment raises one of the following:
  - `UnauthorizedTokenContract` when it comes from any token contract but the configured one;
  - `Uninitialized` when it arrives before the link;
  - `SoldOut` when `max_tokens` have been minted;
  - `WrongPaymentAmount` when the amount is not the unit price.

## What it does not do

- The sale contract returns its messages but does not carry them out. The `WasmInstantiate` and `WasmExecute` messages it produces are handed back in the `Response`. No NFT collection is created, and no token is minted.
- The package has no NFT collection contract. It has no token ownership, transfers or approvals.
- `nftsale.non_transferable` has only the messages, the config store and the `admin` query. It has no execute entry point.
- There is no chain, no network and no persistent storage: `Storage` lives in memory.
- There is no command-line program.

## Tests

```
pytest
```