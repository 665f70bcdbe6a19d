"""CSV export of the fetched roster."""

from pathlib import Path
from typing import Optional, Sequence
import pandas as pd
from rich.console import Console

from puppy_bowl.io.files import file_manager
from puppy_bowl.models.player import Player

console = Console()

ROSTER_COLUMNS = ["id", "name", "breed", "status", "team", "image_url"]


class RosterExporter:
    """Handles roster CSV export."""

    @staticmethod
    def build_roster_dataframe(players: Sequence[Player]) -> pd.DataFrame:
        """One row per player, in fetch order."""
        rows = [
            {
                "id": player.id,
                "name": player.name,
                "breed": player.display_breed,
                "status": player.status or "",
                "team": player.display_team,
                "image_url": player.display_image,
            }
            for player in players
        ]
        return pd.DataFrame(rows, columns=ROSTER_COLUMNS)

    @staticmethod
    def export_roster(
        players: Sequence[Player],
        cohort_name: str,
        output_path: Optional[Path] = None
    ) -> Path:
        """Export the roster to CSV."""
        df = RosterExporter.build_roster_dataframe(players)
        if df.empty:
            raise ValueError("No players to export")

        if output_path is None:
            output_path = file_manager.get_output_path(file_manager.roster_filename(cohort_name))
        else:
            output_path.parent.mkdir(parents=True, exist_ok=True)

        df.to_csv(output_path, index=False, encoding='utf-8')

        console.print(f"[green]✅ Roster exported: {output_path}[/green]")
        console.print(f"[blue]📊 {len(df)} players exported[/blue]")

        return output_path
