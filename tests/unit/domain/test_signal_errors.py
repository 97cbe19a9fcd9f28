"""Unit tests for signal domain errors."""

from __future__ import annotations

import pytest

from consensus_signal.domain.errors import (
    ChainAccessError,
    MalformedConsensusError,
    MissingAnchorError,
    MissingCollaboratorError,
    MissingRequiredParamError,
    MissingSenderError,
    MissingSignatureError,
    NotLocatedError,
    SenderMismatchError,
    SignatureVerificationError,
    SigningError,
)
from consensus_signal.domain.exceptions import SignalError


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            MissingRequiredParamError("sender"),
            MissingCollaboratorError(),
            MissingAnchorError(),
            MissingSenderError(),
            SenderMismatchError("carol", "dave"),
            NotLocatedError(),
            MalformedConsensusError("x"),
            MissingSignatureError(),
            SignatureVerificationError("alice"),
            ChainAccessError(),
        ],
    )
    def test_all_inherit_from_signal_error(self, error: Exception) -> None:
        assert isinstance(error, SignalError)

    def test_signing_errors_share_base(self) -> None:
        assert issubclass(MissingSignatureError, SigningError)
        assert issubclass(SignatureVerificationError, SigningError)


class TestErrorMessages:
    def test_missing_required_param(self) -> None:
        error = MissingRequiredParamError("epoch")
        assert error.param == "epoch"
        assert "'epoch'" in str(error)

    def test_sender_mismatch(self) -> None:
        error = SenderMismatchError("carol", "dave")
        assert "carol" in str(error)
        assert "dave" in str(error)

    def test_malformed_consensus_reason(self) -> None:
        error = MalformedConsensusError("a > b", reason="expected 4 segments, got 2")
        assert error.consensus == "a > b"
        assert "expected 4 segments" in str(error)

    def test_chain_access_code(self) -> None:
        error = ChainAccessError("header not found", code=-32000)
        assert error.code == -32000
        assert "-32000" in str(error)

    def test_missing_collaborator_names_kind(self) -> None:
        assert "local clock" in str(MissingCollaboratorError("local clock"))
