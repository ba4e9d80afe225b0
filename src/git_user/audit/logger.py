"""Audit logger for profile changes."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..config.schema import AuditConfig


class AuditLogger:
    """Append-only JSONL log of profile changes."""

    def __init__(self, config: AuditConfig, log_file: Path):
        """Initialize audit logger.

        Args:
            config: Audit configuration
            log_file: JSONL file the entries are appended to
        """
        self.config = config
        self.log_file = log_file

    def log_event(self, event_type: str, data: Dict[str, Any]) -> None:
        """Log a generic event.

        Args:
            event_type: Type of event (e.g. ``profile_added``)
            data: Event data
        """
        if not self.config.enabled:
            return

        log_entry = {
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            **data,
        }

        self._write_log(log_entry)

    def read_entries(
        self, limit: Optional[int] = None, event_type: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Read logged entries, newest first.

        Lines that are not valid JSON are skipped.

        Args:
            limit: Maximum number of entries to return
            event_type: Only return entries of this type

        Returns:
            List of log entries
        """
        if not self.log_file.exists():
            return []

        entries = []
        with open(self.log_file, encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    entry = json.loads(line)
                except json.JSONDecodeError:
                    continue
                if event_type and entry.get("event_type") != event_type:
                    continue
                entries.append(entry)

        entries.reverse()
        if limit is not None:
            entries = entries[:limit]
        return entries

    def _write_log(self, log_entry: Dict[str, Any]) -> None:
        """Write log entry to file.

        Args:
            log_entry: Log entry to write
        """
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(log_entry) + "\n")
