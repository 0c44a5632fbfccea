import pytest

from nftsale.errors import (
    ContractError,
    Cw721AlreadyLinked,
    Cw721NotLinked,
    InvalidMaxTokens,
    InvalidTokenReplyId,
    InvalidUnitPrice,
    NotFound,
    ParseError,
    ReceiverFailed,
    SoldOut,
    StdError,
    Unauthorized,
    UnauthorizedTokenContract,
    Uninitialized,
    WrongPaymentAmount,
)


@pytest.mark.parametrize(
    "cls, text",
    [
        (Unauthorized, "Unauthorized"),
        (InvalidUnitPrice, "InvalidUnitPrice"),
        (InvalidMaxTokens, "InvalidMaxTokens"),
        (SoldOut, "SoldOut"),
        (UnauthorizedTokenContract, "UnauthorizedTokenContract"),
        (Uninitialized, "Uninitialized"),
        (WrongPaymentAmount, "WrongPaymentAmount"),
        (InvalidTokenReplyId, "InvalidTokenReplyId"),
        (Cw721NotLinked, "Cw721NotLinked"),
        (Cw721AlreadyLinked, "Cw721AlreadyLinked"),
    ],
)
def test_fixed_price_error_messages(cls, text):
    err = cls()
    assert str(err) == text
    assert isinstance(err, ContractError)


def test_receiver_failed_message():
    assert str(ReceiverFailed()) == "I failed because you asked me to do so"


def test_std_error_carries_message():
    err = StdError("storage broke")
    assert str(err) == "storage broke"
    assert isinstance(err, ContractError)


def test_not_found_keeps_kind():
    err = NotFound("config")
    assert err.kind == "config"
    assert "config" in str(err)
    assert isinstance(err, StdError)


def test_parse_error_keeps_target_and_reason():
    err = ParseError("Config", "bad json")
    assert err.target == "Config"
    assert err.reason == "bad json"
    assert "Config" in str(err) and "bad json" in str(err)


def test_errors_can_be_caught_as_contract_error():
    err = SoldOut()
    with pytest.raises(ContractError) as info:
        raise err
    assert info.value is err
    assert str(info.value) == "SoldOut"
    assert not isinstance(info.value, StdError)