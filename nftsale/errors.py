"""Errors raised by the contracts and their runtime helpers."""

from __future__ import annotations


class ContractError(Exception):
    """Base class of every error a contract raises."""

    message = "contract error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class StdError(ContractError):
    """A failure in storage, serialization or another runtime service."""

    message = "standard error"


class NotFound(StdError):
    """A value that was required is missing from storage."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"{kind} not found")


class ParseError(StdError):
    """Data could not be decoded."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Error parsing into type {target}: {reason}")


class Unauthorized(ContractError):
    message = "Unauthorized"


class InvalidUnitPrice(ContractError):
    message = "InvalidUnitPrice"


class InvalidMaxTokens(ContractError):
    message = "InvalidMaxTokens"


class SoldOut(ContractError):
    message = "SoldOut"


class UnauthorizedTokenContract(ContractError):
    message = "UnauthorizedTokenContract"


class Uninitialized(ContractError):
    message = "Uninitialized"


class WrongPaymentAmount(ContractError):
    message = "WrongPaymentAmount"


class InvalidTokenReplyId(ContractError):
    message = "InvalidTokenReplyId"


class Cw721NotLinked(ContractError):
    message = "Cw721NotLinked"


class Cw721AlreadyLinked(ContractError):
    message = "Cw721AlreadyLinked"


class ReceiverFailed(ContractError):
    """Raised by the receiver when the inner message asks it to fail."""

    message = "I failed because you asked me to do so"