"""Authorization contexts and the custom account interface."""

from __future__ import annotations

import string
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from .bytesn import BytesN
from .errors import ConversionError

_SYMBOL_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_SYMBOL_MAX_LEN = 32


def _symbol(name: str) -> str:
    if not isinstance(name, str):
        raise ConversionError(f"symbol must be a string, not {type(name).__name__}")
    if len(name) > _SYMBOL_MAX_LEN:
        raise ConversionError(f"symbol longer than {_SYMBOL_MAX_LEN} characters: {name!r}")
    if not set(name) <= _SYMBOL_CHARS:
        raise ConversionError(f"symbol has invalid characters: {name!r}")
    return name


def _hash32(value: Any) -> BytesN:
    return BytesN.from_bytes(32, value)


@dataclass(frozen=True)
class ContractContext:
    """Context of a single authorized contract call."""

    contract: Any
    fn_name: str
    args: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fn_name", _symbol(self.fn_name))
        object.__setattr__(self, "args", tuple(self.args))


@dataclass(frozen=True)
class ContractExecutableWasm:
    """Contract executable identified by the hash of its Wasm code."""

    wasm_hash: BytesN

    def __post_init__(self) -> None:
        object.__setattr__(self, "wasm_hash", _hash32(self.wasm_hash))


ContractExecutable = ContractExecutableWasm


@dataclass(frozen=True)
class CreateContractHostFnContext:
    """Authorization context for creating a contract on behalf of an address."""

    executable: ContractExecutableWasm
    salt: BytesN

    def __post_init__(self) -> None:
        if not isinstance(self.executable, ContractExecutableWasm):
            raise ConversionError("executable must be a ContractExecutableWasm")
        object.__setattr__(self, "salt", _hash32(self.salt))


Context = Union[ContractContext, CreateContractHostFnContext]


@dataclass(frozen=True)
class SubContractInvocation:
    """Contract node in the tree of authorizations made by the current contract."""

    context: ContractContext
    sub_invocations: tuple = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.context, ContractContext):
            raise ConversionError("context must be a ContractContext")
        subs = tuple(self.sub_invocations)
        for entry in subs:
            if not isinstance(entry, (SubContractInvocation, CreateContractHostFnContext)):
                raise ConversionError(f"invalid authorization entry: {entry!r}")
        object.__setattr__(self, "sub_invocations", subs)


InvokerContractAuthEntry = Union[SubContractInvocation, CreateContractHostFnContext]


class CustomAccountInterface(ABC):
    """Interface a contract implements to act as a custom account for auth."""

    @abstractmethod
    def check_auth(
        self,
        signature_payload: BytesN,
        signatures: Sequence[Any],
        auth_contexts: Sequence[Context],
    ) -> None:
        """Check that the signatures and contexts are valid; raise if they are not."""