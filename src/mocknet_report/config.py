"""
Configuration management for report output.
"""
from dataclasses import dataclass
from typing import Optional
import json
import os


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "json")


@dataclass
class ReportConfig:
    """Configuration for the report command line."""

    # Output (None writes to stdout)
    output: Optional[str] = None
    append: bool = True  # Append to an existing output file instead of truncating

    # Logging
    log_level: str = "WARNING"
    log_format: str = "console"

    def __post_init__(self):
        """Ensure the output directory exists."""
        if self.output and os.path.dirname(self.output):
            os.makedirs(os.path.dirname(self.output), exist_ok=True)

    @classmethod
    def from_file(cls, path: str) -> "ReportConfig":
        """Load configuration from a JSON file."""
        with open(path, "r") as f:
            data = json.load(f)
        return cls(**data)

    def to_file(self, path: str):
        """Save configuration to a JSON file."""
        data = {
            k: v for k, v in self.__dict__.items()
            if not k.startswith("_")
        }
        with open(path, "w") as f:
            json.dump(data, f, indent=2)

    @property
    def file_mode(self) -> str:
        """Mode used to open the output file."""
        return "a" if self.append else "w"

    def validate(self) -> bool:
        """Validate configuration parameters."""
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level}")

        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")

        return True
