"""File management utilities."""

from datetime import datetime
from pathlib import Path
from typing import Optional
from puppy_bowl.config import ConfigManager


class FileManager:
    """Manages file paths and directories."""

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        self.config_manager = config_manager or ConfigManager()

    def get_output_path(self, filename: str) -> Path:
        """Get output file path."""
        output_dir = self.config_manager.get_output_dir()
        return output_dir / filename

    def roster_filename(self, cohort_name: str) -> str:
        """Generate roster CSV filename."""
        safe_cohort = "".join(c for c in cohort_name if c.isalnum() or c in "._-")
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return f"roster_{safe_cohort}_{timestamp}.csv"


# Global file manager instance
file_manager = FileManager()
