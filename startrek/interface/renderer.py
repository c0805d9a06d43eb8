"""ASCII rendering of scans, reports and the score card.

This module turns the engine's scan data into the fixed-width text shown
in the console, the TUI and the HTTP API.
"""

from typing import Optional, Sequence, Tuple

from ..models import EntityKind, GalaxyMap, QuadrantSummary, ScoreRecord, ShipSystem
from ..utils.constants import SYSTEM_OPERATIONAL_THRESHOLD

SECTOR_SYMBOLS = {
    EntityKind.SHIP: "E",
    EntityKind.HOSTILE: "K",
    EntityKind.RESUPPLY: "B",
    EntityKind.OBSTACLE: "*",
}
EMPTY_SECTOR = "."
OUT_OF_GALAXY = "***"
UNVISITED = "..."


class MapRenderer:
    """Renders sensor scans and ship reports as text."""

    def render_short_range(self, grid: Sequence[Sequence[Optional[EntityKind]]]) -> str:
        """Render the sector grid of the current quadrant.

        Output format (8x8, one char per sector):
           0 1 2 3 4 5 6 7
         0 . . * . . . . .
         1 . E . . K . . .
        ...

        Args:
            grid: Rows of EntityKind or None, indexed [y][x]

        Returns:
            Multi-line string with coordinate labels
        """
        header = "   " + " ".join(str(i) for i in range(len(grid[0])))
        lines = [header]
        for y, row in enumerate(grid):
            cells = " ".join(SECTOR_SYMBOLS.get(kind, EMPTY_SECTOR) for kind in row)
            lines.append(f"{y:2d} {cells}")
        return "\n".join(lines)

    def render_long_range(self, rows: Sequence[Sequence[Optional[QuadrantSummary]]]) -> str:
        """Render the 3x3 long-range scan.

        Each quadrant shows a three digit code: hostiles, resupply
        stations, obstacles. Quadrants outside the galaxy show ***.
        """
        separator = "+-----+-----+-----+"
        lines = [separator]
        for row in rows:
            codes = [summary.code if summary else OUT_OF_GALAXY for summary in row]
            lines.append("| " + " | ".join(codes) + " |")
            lines.append(separator)
        return "\n".join(lines)

    def render_galactic_record(
        self, galaxy: GalaxyMap, current: Optional[Tuple[int, int]] = None
    ) -> str:
        """Render the cumulative galactic record.

        Unvisited quadrants show ..., the ship's quadrant is bracketed.

        Args:
            galaxy: Galaxy map
            current: The ship's (qx, qy), if it should be marked

        Returns:
            Multi-line string with coordinate labels
        """
        size = len(galaxy.cells)
        header = "    " + " ".join(f" {i}  " for i in range(size))
        lines = [header]
        for y in range(size):
            cells = []
            for x in range(size):
                summary = galaxy.get(x, y)
                code = summary.code if summary.visited else UNVISITED
                cells.append(f"[{code}]" if (x, y) == current else f" {code} ")
            lines.append(f"{y:2d} " + "".join(cells))
        return "\n".join(lines)

    def render_damage_report(self, report: Sequence[Tuple[ShipSystem, float]]) -> str:
        """Render system health as percentages with an OFFLINE marker."""
        width = max(len(system.value) for system, _ in report)
        lines = ["DAMAGE CONTROL REPORT"]
        for system, health in report:
            marker = "" if health >= SYSTEM_OPERATIONAL_THRESHOLD else "  OFFLINE"
            lines.append(f"  {system.value:<{width}}  {health * 100:5.1f}%{marker}")
        return "\n".join(lines)

    def render_status(self, mission) -> str:
        """Render the ship and mission status block."""
        ship = mission.ship
        state = mission.state
        qx, qy = ship.quadrant
        sx, sy = ship.sector
        lines = [
            f"Stardate:      {state.stardate}",
            f"Condition:     {mission.condition().value}",
            f"Quadrant:      {qx},{qy}",
            f"Sector:        {sx},{sy}",
            f"Energy:        {ship.energy}",
            f"Shields:       {ship.shields} ({'UP' if ship.shields_up else 'DOWN'})",
            f"Torpedoes:     {ship.torpedoes}",
            f"Hostiles left: {state.hostiles_remaining}",
            f"Time left:     {state.stardates_remaining} stardates",
            f"Score:         {mission.live_score()}",
        ]
        return "\n".join(lines)

    def render_targets(self, solutions) -> str:
        """Render library computer firing data."""
        lines = ["Sector   Distance  Course  Energy"]
        for target in solutions:
            x, y = target.sector
            lines.append(f"{x},{y}      {target.distance:6.2f}  {target.course:6.2f}  {target.energy:6d}")
        return "\n".join(lines)

    def render_score(self, score: ScoreRecord) -> str:
        """Render the final score card."""
        lines = ["FINAL SCORE"]
        for label, points in score.breakdown():
            lines.append(f"  {label:<20} {points:6d}")
        lines.append(f"  {'Total':<20} {score.total:6d}")
        lines.append(f"  Grade: {score.grade} - {score.grade_description}")
        return "\n".join(lines)
