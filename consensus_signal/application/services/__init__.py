"""Application services for consensus-signal."""

from consensus_signal.application.services.signal_sequencer import (
    SequenceResult,
    SignalSequencer,
)

__all__: list[str] = ["SequenceResult", "SignalSequencer"]
