"""
Transcript of demo runs.

The catalog captures what each demo prints and keeps it here, so output
can be compared across runs or replayed without running the demo again.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class TranscriptEntry:
    """One captured demo run.

    Attributes:
        demo_name: Name of the demo that produced the output
        output: Everything the demo wrote to stdout
        timestamp: When the run finished
        metadata: Additional data about the run (category, duration)
    """

    demo_name: str
    output: str
    timestamp: datetime = field(default_factory=datetime.now)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def lines(self) -> List[str]:
        return self.output.splitlines()

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "demo_name": self.demo_name,
            "output": self.output,
            "timestamp": self.timestamp.isoformat(),
        }

        if self.metadata:
            result["metadata"] = dict(self.metadata)

        return result


class Transcript:
    """Ordered record of demo outputs.

    The latest output per demo is available by name; the full history of
    runs (including repeats) is available through ``get_entries``.

    Usage:
        transcript = Transcript()
        transcript.set_output("observer", "Observer 1 received message: ...\\n")
        transcript.get_output("observer")
    """

    def __init__(self) -> None:
        self._entries: List[TranscriptEntry] = []
        self._latest: Dict[str, TranscriptEntry] = {}

    def set_output(self, demo_name: str, output: str, **metadata: Any) -> None:
        """Record the output of a demo run.

        Args:
            demo_name: Name of the demo
            output: Captured stdout
            **metadata: Additional data about the run
        """
        entry = TranscriptEntry(demo_name=demo_name, output=output, metadata=metadata)
        self._entries.append(entry)
        self._latest[demo_name] = entry

    def get_output(self, demo_name: str) -> Optional[str]:
        """Get the most recent output of a demo, or None if it never ran."""
        entry = self._latest.get(demo_name)
        return entry.output if entry else None

    def get_last_output(self) -> Optional[str]:
        """Get the output of the most recent run of any demo."""
        if not self._entries:
            return None
        return self._entries[-1].output

    def get_entries(self, demo_name: Optional[str] = None) -> List[TranscriptEntry]:
        """Get recorded runs.

        Args:
            demo_name: Filter by demo name (None for all)

        Returns:
            List of entries in run order
        """
        if demo_name is None:
            return list(self._entries)

        return [e for e in self._entries if e.demo_name == demo_name]

    def list_runs(self) -> List[str]:
        """Names of demos that have run, in first-run order."""
        return list(self._latest.keys())

    def clear(self) -> None:
        self._entries.clear()
        self._latest.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Transcript(runs={len(self._entries)}, demos={len(self._latest)})"
