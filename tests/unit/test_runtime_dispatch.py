"""Tests for executing the generated inherent and unsigned dispatchers."""

from typing import Any

import pytest

from runtime_assembler.core import ir
from runtime_assembler.core.assembler import assemble_runtime
from runtime_assembler.core.errors import UnresolvedModuleError
from runtime_assembler.runtime import (
    Block,
    Extrinsic,
    InherentCheckError,
    InherentData,
    OuterCall,
    RuntimeCall,
    TransactionValidity,
    UnsignedValidator,
    ValidityOutcome,
    bind_dispatchers,
)

from tests.helpers import declare


class TimestampModule:
    """Inherent provider that sets the block timestamp."""

    def __init__(self, drift: int = 30):
        self.drift = drift

    def create_inherent(self, data: InherentData) -> Any | None:
        return ("set", data["timestamp"])

    def check_inherent(self, call: Any, data: InherentData) -> None:
        _, value = call
        if abs(value - data["timestamp"]) > self.drift:
            raise InherentCheckError("timestamp too far from local time")


class AuraModule:
    """Inherent provider that piggybacks on the timestamp call."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.checked: list[Any] = []

    def create_inherent(self, data: InherentData) -> Any | None:
        return None

    def check_inherent(self, call: Any, data: InherentData) -> None:
        self.checked.append(call)
        if self.fail:
            raise InherentCheckError("slot mismatch", fatal=False)


class Validator:
    """ValidateUnsigned module returning a fixed answer."""

    def __init__(self, answer: TransactionValidity):
        self.answer = answer
        self.calls: list[RuntimeCall] = []

    def validate_unsigned(self, call: RuntimeCall) -> TransactionValidity:
        self.calls.append(call)
        return self.answer


@pytest.fixture
def inherent_runtime() -> ir.AssembledRuntime:
    return assemble_runtime(
        declare(
            "System: system",
            "Timestamp: timestamp::{Module, Call, Storage, Inherent}",
            "Aura: aura::{Module, Inherent(Timestamp)}",
            "Balances: balances",
        )
    )


def _block(*calls: RuntimeCall, signed: tuple[RuntimeCall, ...] = ()) -> Block:
    extrinsics = [Extrinsic(call=call) for call in calls]
    extrinsics += [Extrinsic(call=call, signed=True) for call in signed]
    return Block(extrinsics=extrinsics)


class TestOuterCall:
    def test_wrap_uses_variant_index(self, inherent_runtime: ir.AssembledRuntime):
        outer = OuterCall(inherent_runtime.call)
        call = outer.wrap("Balances", ("transfer", 10))

        assert call.index == 2
        assert call.module == "Balances"
        assert outer.is_current(call)

    def test_from_index(self, inherent_runtime: ir.AssembledRuntime):
        outer = OuterCall(inherent_runtime.call)
        assert outer.from_index(1, "set").module == "Timestamp"

    def test_stale_index_is_not_current(self, inherent_runtime: ir.AssembledRuntime):
        outer = OuterCall(inherent_runtime.call)

        assert not outer.is_current(RuntimeCall(index=0, module="Balances", call=None))
        assert not outer.is_current(RuntimeCall(index=0, module="Aura", call=None))

    def test_wrap_module_without_call(self, inherent_runtime: ir.AssembledRuntime):
        with pytest.raises(KeyError):
            OuterCall(inherent_runtime.call).wrap("Aura", None)


class TestInherentDispatcher:
    def test_create_extrinsics(self, inherent_runtime: ir.AssembledRuntime):
        inherents, _ = bind_dispatchers(
            inherent_runtime, {"Timestamp": TimestampModule(), "Aura": AuraModule()}
        )

        extrinsics = inherents.create_extrinsics({"timestamp": 1000})

        assert len(extrinsics) == 1
        assert extrinsics[0].call == RuntimeCall(index=1, module="Timestamp", call=("set", 1000))
        assert not extrinsics[0].signed

    def test_check_passes(self, inherent_runtime: ir.AssembledRuntime):
        aura = AuraModule()
        inherents, _ = bind_dispatchers(
            inherent_runtime, {"Timestamp": TimestampModule(), "Aura": aura}
        )
        block = _block(*(e.call for e in inherents.create_extrinsics({"timestamp": 1000})))

        result = inherents.check_extrinsics(block, {"timestamp": 1010})

        assert result.ok
        assert result.checked == ["Timestamp", "Aura"]
        assert aura.checked == [("set", 1000)]

    def test_failures_do_not_stop_other_checks(self, inherent_runtime: ir.AssembledRuntime):
        aura = AuraModule(fail=True)
        inherents, _ = bind_dispatchers(
            inherent_runtime, {"Timestamp": TimestampModule(), "Aura": aura}
        )
        block = _block(RuntimeCall(index=1, module="Timestamp", call=("set", 0)))

        result = inherents.check_extrinsics(block, {"timestamp": 1000})

        assert not result.ok
        assert result.fatal_error
        assert [(f.module, f.fatal) for f in result.failures] == [
            ("Timestamp", True),
            ("Aura", False),
        ]
        assert result.failures[0].message == "timestamp too far from local time"
        assert aura.checked == [("set", 0)]

    def test_non_fatal_failure_only(self, inherent_runtime: ir.AssembledRuntime):
        inherents, _ = bind_dispatchers(
            inherent_runtime, {"Timestamp": TimestampModule(), "Aura": AuraModule(fail=True)}
        )
        block = _block(RuntimeCall(index=1, module="Timestamp", call=("set", 1000)))

        result = inherents.check_extrinsics(block, {"timestamp": 1000})

        assert not result.ok
        assert not result.fatal_error

    def test_check_stops_at_first_signed_extrinsic(self, inherent_runtime: ir.AssembledRuntime):
        inherents, _ = bind_dispatchers(
            inherent_runtime, {"Timestamp": TimestampModule(), "Aura": AuraModule()}
        )
        block = _block(
            RuntimeCall(index=2, module="Balances", call="transfer"),
            signed=(RuntimeCall(index=1, module="Timestamp", call=("set", 0)),),
        )

        result = inherents.check_extrinsics(block, {"timestamp": 1000})

        assert result.ok
        assert result.checked == []

    def test_missing_implementation(self, inherent_runtime: ir.AssembledRuntime):
        with pytest.raises(UnresolvedModuleError, match="No implementation provided for module 'Aura'"):
            bind_dispatchers(inherent_runtime, {"Timestamp": TimestampModule()})

    def test_implementation_without_protocol(self, inherent_runtime: ir.AssembledRuntime):
        with pytest.raises(UnresolvedModuleError, match="does not implement ProvideInherent"):
            bind_dispatchers(inherent_runtime, {"Timestamp": object(), "Aura": AuraModule()})

    def test_call_source_without_call(self):
        runtime = assemble_runtime(
            declare("System: system", "Aura: aura::{Module, Inherent(Missing)}")
        )
        with pytest.raises(UnresolvedModuleError, match="'Missing' of module 'Aura' does not declare Call"):
            bind_dispatchers(runtime, {"Aura": AuraModule()})


class TestUnsignedValidator:
    CALL = RuntimeCall(index=0, module="OffchainWorker", call="heartbeat")

    def _validator(self, *answers: TransactionValidity) -> tuple[UnsignedValidator, list[Validator]]:
        names = [f"Worker{i}" for i in range(len(answers))]
        entries = ["System: system"] + [
            f"{name}: worker{i}::{{Module, Call, ValidateUnsigned}}" for i, name in enumerate(names)
        ]
        assembled = assemble_runtime(declare(*entries))
        validators = [Validator(answer) for answer in answers]
        modules = dict(zip(names, validators))
        return UnsignedValidator(assembled.validate_unsigned, modules), validators

    def test_zero_modules_rejects_everything(self):
        validator, _ = self._validator()

        validity = validator.validate(self.CALL)

        assert validity.outcome == ValidityOutcome.INVALID
        assert not validity.is_valid
        assert validity.reason == "no module accepted the unsigned call"

    def test_first_definitive_answer_wins(self):
        validator, modules = self._validator(
            TransactionValidity.valid(priority=5),
            TransactionValidity.invalid("should not be asked"),
        )

        validity = validator.validate(self.CALL)

        assert validity.is_valid
        assert validity.priority == 5
        assert validity.module == "Worker0"
        assert modules[1].calls == []

    def test_unknown_defers_to_next_module(self):
        validator, modules = self._validator(
            TransactionValidity.unknown("not mine"),
            TransactionValidity.invalid("bad signature payload"),
        )

        validity = validator.validate(self.CALL)

        assert validity.outcome == ValidityOutcome.INVALID
        assert validity.reason == "bad signature payload"
        assert validity.module == "Worker1"
        assert modules[0].calls == [self.CALL]

    def test_all_unknown_is_rejected(self):
        validator, _ = self._validator(
            TransactionValidity.unknown(),
            TransactionValidity.unknown(),
        )
        validity = validator.validate(self.CALL)
        assert validity.outcome == ValidityOutcome.INVALID
        assert validity.module is None
