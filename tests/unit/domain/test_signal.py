"""Unit tests for the Signal entity: construction, accessors, payload."""

from __future__ import annotations

from typing import Any

import pytest

from consensus_signal.domain.errors import MalformedConsensusError, MissingRequiredParamError
from consensus_signal.domain.models.signal import Signal


class TestConstructionFromClaim:
    """Signal(claim=...) composes the consensus string."""

    def test_composes_consensus(self) -> None:
        """alice/vote/3/0xaa composes 'alice > vote > 3 > 0xaa'."""
        signal = Signal(claim={"sender": "alice", "action": "vote", "epoch": "3", "block": "0xaa"})

        assert signal.consensus == "alice > vote > 3 > 0xaa"
        assert signal.sender == "alice"
        assert signal.action == "vote"
        assert signal.epoch == "3"
        assert signal.block == "0xaa"

    def test_consensus_stored_in_signed_data(self, claim: dict[str, Any]) -> None:
        signal = Signal(claim=claim)
        assert signal.payload["_signed_"]["@"] == "alice > vote > 3 > 0xaa"

    def test_numeric_epoch(self) -> None:
        signal = Signal(claim={"sender": "alice", "action": "vote", "epoch": 3, "block": "0xaa"})

        assert signal.epoch == "3"
        assert signal.consensus == "alice > vote > 3 > 0xaa"

    @pytest.mark.parametrize("missing", ["sender", "action", "epoch", "block"])
    def test_missing_field_raises(self, claim: dict[str, Any], missing: str) -> None:
        del claim[missing]

        with pytest.raises(MissingRequiredParamError) as exc_info:
            Signal(claim=claim)

        assert exc_info.value.param == missing

    @pytest.mark.parametrize("missing", ["sender", "action", "epoch", "block"])
    def test_empty_field_raises(self, claim: dict[str, Any], missing: str) -> None:
        claim[missing] = ""

        with pytest.raises(MissingRequiredParamError):
            Signal(claim=claim)

    def test_optional_coordinates_become_params(self) -> None:
        signal = Signal(
            claim={
                "sender": "alice",
                "action": "vote",
                "epoch": "3",
                "block": "0xaa",
                "blockNumber": 10,
                "timestamp": 1_700_000_000,
                "world": "earth",
            }
        )

        assert signal.block_number == 10
        assert signal.timestamp == 1_700_000_000
        assert signal.world == "earth"
        assert signal.located

    def test_absent_optional_coordinates_not_set(self) -> None:
        signal = Signal(claim={"sender": "alice", "action": "vote", "epoch": "3", "block": "0xaa"})

        assert "world" not in signal.params
        assert "blockNumber" not in signal.params
        assert not signal.located

    def test_claim_keeps_payload_contained_data(self, claim: dict[str, Any]) -> None:
        """Extra signed data from a payload survives claim composition."""
        signal = Signal({"_signed_": {"ballot": "yes"}}, claim=claim)

        assert signal.contained == {"ballot": "yes"}
        assert signal.consensus == "alice > vote > 3 > 0xaa"

    def test_claim_field_with_separator_raises(self, claim: dict[str, Any]) -> None:
        claim["action"] = "vote > veto"

        with pytest.raises(MalformedConsensusError):
            Signal(claim=claim)


class TestConstructionFromPayload:
    """Signal(payload) parses an existing consensus string."""

    def test_parses_consensus(self) -> None:
        """'bob > move > 1 > 0xff' yields bob/move/1/0xff."""
        signal = Signal({"_signed_": {"@": "bob > move > 1 > 0xff"}})

        assert signal.sender == "bob"
        assert signal.action == "move"
        assert signal.epoch == "1"
        assert signal.block == "0xff"

    def test_malformed_consensus_raises(self) -> None:
        with pytest.raises(MalformedConsensusError):
            Signal({"_signed_": {"@": "bob > move > 1"}})

    def test_params_are_loaded(self) -> None:
        signal = Signal(
            {
                "_signed_": {"@": "bob > move > 1 > 0xff"},
                "_params_": {"sig": "0xsig", "alias": "bob", "world": "earth", "blockNumber": "7"},
            }
        )

        assert signal.sig == "0xsig"
        assert signal.alias == "bob"
        assert signal.world == "earth"
        assert signal.block_number == 7

    def test_received_signed_data_unchanged(self) -> None:
        """A foreign payload without a uuid is carried exactly as received."""
        wire = {"_signed_": {"@": "bob > move > 1 > 0xff"}}

        first, second = Signal(wire), Signal(wire)

        assert first.payload["_signed_"] == wire["_signed_"]
        assert first.uuid == second.uuid

    def test_payload_round_trip(self, claim: dict[str, Any]) -> None:
        """A rebuilt signal agrees with the original on every field."""
        original = Signal(claim=claim)
        original.add_params({"blockNumber": 10, "timestamp": 1_700_000_000})

        rebuilt = Signal(original.payload)

        assert rebuilt.consensus == original.consensus
        assert rebuilt.uuid == original.uuid
        assert rebuilt.standard_params == original.standard_params

    def test_no_claim_no_consensus(self) -> None:
        """Without claim or consensus the claim fields are undefined."""
        signal = Signal()

        assert signal.consensus is None
        assert signal.sender is None
        assert signal.action is None
        assert signal.epoch is None
        assert signal.block is None


class TestPayload:
    def test_payload_has_only_standard_params(self, claim: dict[str, Any]) -> None:
        signal = Signal(claim=claim)
        signal.add_params({"note": "private", "timestamp": 5})

        assert signal.payload["_params_"] == {"world": "earth", "timestamp": 5}

    def test_payload_is_a_copy(self, claim: dict[str, Any]) -> None:
        signal = Signal(claim=claim)
        signal.payload["_signed_"]["@"] = "tampered"

        assert signal.consensus == "alice > vote > 3 > 0xaa"

    def test_contained_excludes_consensus_and_identity(self, claim: dict[str, Any]) -> None:
        signal = Signal(claim=claim)
        assert signal.contained == {}


class TestParamAccessors:
    def test_numeric_params_normalized(self, claim: dict[str, Any]) -> None:
        signal = Signal(claim=claim)
        signal.add_params({"blockNumber": "12", "timestamp": "0x10", "dropped": "20"})

        assert signal.block_number == 12
        assert signal.timestamp == 16
        assert signal.dropped == 20

    def test_located_by_timestamp_only(self, claim: dict[str, Any]) -> None:
        signal = Signal(claim=claim)
        signal.add_params({"timestamp": 1})
        assert signal.located

    def test_located_by_block_number_only(self, claim: dict[str, Any]) -> None:
        signal = Signal(claim=claim)
        signal.add_params({"blockNumber": 0})
        assert signal.located

    def test_clear_location(self, claim: dict[str, Any]) -> None:
        signal = Signal(claim=claim)
        signal.add_params({"blockNumber": 10, "timestamp": 1, "note": "keep"})

        signal.clear_location()

        assert not signal.located
        assert signal.custom_params == {"note": "keep"}
        assert signal.world == "earth"

    def test_clear_custom_params(self, claim: dict[str, Any]) -> None:
        signal = Signal(claim=claim)
        signal.add_params({"note": "drop", "dropped": 3})

        signal.clear_custom_params()

        assert signal.custom_params == {}
        assert signal.world == "earth"

    def test_add_params_never_touches_signed_data(self, claim: dict[str, Any]) -> None:
        signal = Signal(claim=claim)
        signal.add_params({"@": "mallory > steal > 1 > 0x00"})

        assert signal.consensus == "alice > vote > 3 > 0xaa"
        assert signal.sender == "alice"

    def test_consensus_is_read_only(self, claim: dict[str, Any]) -> None:
        signal = Signal(claim=claim)

        with pytest.raises(AttributeError):
            signal.consensus = "x > y > z > w"  # type: ignore[misc]
        with pytest.raises(AttributeError):
            signal.sender = "mallory"  # type: ignore[misc]
