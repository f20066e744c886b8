import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from sorokit.auth import (
    ContractContext,
    ContractExecutableWasm,
    CreateContractHostFnContext,
    CustomAccountInterface,
    SubContractInvocation,
)
from sorokit.bytesn import BytesN
from sorokit.crypto import ed25519_verify, sha256
from sorokit.errors import ConversionError, HostError


def test_contract_context_converts_args_to_tuple():
    ctx = ContractContext("contract-a", "add", [1, 2])
    assert ctx.args == (1, 2)
    assert ctx.fn_name == "add"
    assert ctx == ContractContext("contract-a", "add", (1, 2))


@pytest.mark.parametrize("name", ["bad name", "x" * 33, "dash-ed"])
def test_contract_context_rejects_invalid_symbol(name):
    with pytest.raises(ConversionError):
        ContractContext("contract-a", name)


def test_contract_context_accepts_longest_symbol():
    ctx = ContractContext("c", "a" * 32)
    assert len(ctx.fn_name) == 32


def test_executable_requires_32_byte_hash():
    exe = ContractExecutableWasm(bytes(32))
    assert isinstance(exe.wasm_hash, BytesN)
    assert exe.wasm_hash == bytes(32)
    with pytest.raises(ConversionError):
        ContractExecutableWasm(bytes(31))


def test_create_contract_context_checks_salt_and_executable():
    exe = ContractExecutableWasm(bytes([7] * 32))
    ctx = CreateContractHostFnContext(exe, bytes([1] * 32))
    assert ctx.salt == bytes([1] * 32)
    with pytest.raises(ConversionError):
        CreateContractHostFnContext(exe, bytes(10))
    with pytest.raises(ConversionError):
        CreateContractHostFnContext("not an executable", bytes(32))


def test_sub_contract_invocation_tree():
    leaf = SubContractInvocation(ContractContext("b", "fnb", ["addr"]))
    create = CreateContractHostFnContext(ContractExecutableWasm(bytes(32)), bytes(32))
    root = SubContractInvocation(ContractContext("a", "fna", ["addr"]), [leaf, create])
    assert root.sub_invocations == (leaf, create)
    assert root.sub_invocations[0].context.fn_name == "fnb"
    assert leaf.sub_invocations == ()


def test_sub_contract_invocation_rejects_bad_entries():
    with pytest.raises(ConversionError):
        SubContractInvocation(ContractContext("a", "fna"), ["junk"])
    with pytest.raises(ConversionError):
        SubContractInvocation("not a context")


def test_interface_cannot_be_instantiated():
    with pytest.raises(TypeError):
        CustomAccountInterface()


class _SingleKeyAccount(CustomAccountInterface):
    def __init__(self, public_key):
        self.public_key = public_key
        self.seen = []

    def check_auth(self, signature_payload, signatures, auth_contexts):
        if len(signatures) != 1:
            raise HostError("Auth", "InvalidInput")
        ed25519_verify(self.public_key, signature_payload, signatures[0])
        self.seen.extend(auth_contexts)


def test_custom_account_verifies_signature():
    private = Ed25519PrivateKey.generate()
    public = private.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
    account = _SingleKeyAccount(public)
    payload = sha256(b"payload")
    ctx = ContractContext("token", "approve", ["from", "spender", 20, 200])

    account.check_auth(payload, [private.sign(payload.to_bytes())], [ctx])
    assert account.seen == [ctx]

    other = Ed25519PrivateKey.generate()
    with pytest.raises(HostError):
        account.check_auth(payload, [other.sign(payload.to_bytes())], [ctx])
    with pytest.raises(HostError):
        account.check_auth(payload, [], [ctx])
    assert account.seen == [ctx]