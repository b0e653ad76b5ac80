"""Output formatters and exporters for load reports."""

from __future__ import annotations

import json
from typing import Any

from truckpack.domain import AABB, Container, LoadReport
from truckpack.domain.value_objects import CoGResult, Position3

# Cubic inches per cubic foot
CUBIC_INCHES_PER_FOOT: float = 1728.0


def _position(pos: Position3) -> dict[str, float]:
    return {"x": pos.x, "y": pos.y, "z": pos.z}


def _zone(zone: AABB) -> dict[str, Any]:
    return {
        "min": _position(zone.min),
        "max": _position(zone.max),
        "volume_in3": zone.volume_in3,
    }


class ZoneListFormatter:
    """Formats a container's usable zones as a table."""

    def format(self, container: Container, zones: list[AABB]) -> str:
        length, width, height = container.envelope
        lines = [
            "USABLE ZONES",
            "=" * 78,
            f"Container: {length:g} x {width:g} x {height:g} in "
            f"({container.shape_mode.value})",
            "-" * 78,
        ]
        if not zones:
            lines.append("No usable zones.")
            return "\n".join(lines)

        lines.append(
            f"{'#':<3} {'X range':<22} {'Y range':<20} {'Z range':<22} {'Volume (cu ft)'}"
        )
        total = 0.0
        for index, zone in enumerate(zones, start=1):
            x_range = f"{zone.min.x:.1f}..{zone.max.x:.1f}"
            y_range = f"{zone.min.y:.1f}..{zone.max.y:.1f}"
            z_range = f"{zone.min.z:.1f}..{zone.max.z:.1f}"
            cubic_feet = zone.volume_in3 / CUBIC_INCHES_PER_FOOT
            lines.append(
                f"{index:<3} {x_range:<22} {y_range:<20} {z_range:<22} {cubic_feet:.1f}"
            )
            total += zone.volume_in3

        lines.append("-" * 78)
        lines.append(
            f"Capacity: {total:.1f} cu in ({total / CUBIC_INCHES_PER_FOOT:.1f} cu ft)"
        )
        return "\n".join(lines)


class LoadReportFormatter:
    """Formats a LoadReport as a human-readable text report."""

    def format(self, report: LoadReport) -> str:
        sections = [
            self._format_stats(report),
            self._format_cog(report.center_of_gravity),
            self._format_oog(report),
            self._format_pallets(report),
        ]
        return "\n\n".join(sections)

    def _format_stats(self, report: LoadReport) -> str:
        stats = report.stats
        return "\n".join(
            [
                "PACK STATISTICS",
                "=" * 60,
                f"Items packed:   {stats.packed_count} / {stats.total_count}",
                f"Volume used:    {stats.used_volume_in3:.1f} cu in "
                f"({stats.used_volume_in3 / CUBIC_INCHES_PER_FOOT:.1f} cu ft)",
                f"Capacity:       {stats.capacity_in3:.1f} cu in "
                f"({stats.used_volume_percent:.1f}% used)",
                f"Packed weight:  {stats.total_weight_lb:.1f} lb",
            ]
        )

    def _format_cog(self, cog: CoGResult | None) -> str:
        lines = ["CENTER OF GRAVITY", "=" * 60]
        if cog is None:
            lines.append("No weighted items.")
            return "\n".join(lines)

        prefix = {"ok": "[OK]", "warning": "[WARN]", "critical": "[CRIT]"}
        lines.extend(
            [
                f"Status:         {prefix[cog.status.value]} {cog.status.value}",
                f"Position:       x={cog.position.x:.1f} y={cog.position.y:.1f} "
                f"z={cog.position.z:.1f} in",
                f"Deviation:      {cog.deviation_percent.x:+.1f}% longitudinal, "
                f"{cog.deviation_percent.z:+.1f}% lateral",
                f"Total weight:   {cog.total_weight_lb:.1f} lb",
            ]
        )
        return "\n".join(lines)

    def _format_oog(self, report: LoadReport) -> str:
        lines = ["OUT OF GAUGE", "=" * 60]
        if not report.oog_warnings:
            lines.append("All items within container envelope.")
            return "\n".join(lines)

        for warning in report.oog_warnings:
            name = f" ({warning.item_name})" if warning.item_name else ""
            issues = ", ".join(issue.value for issue in warning.sorted_issues)
            lines.append(f"[WARN] {warning.instance_id}{name}: {issues}")
        return "\n".join(lines)

    def _format_pallets(self, report: LoadReport) -> str:
        lines = ["PALLET LOADS", "=" * 60]
        if not report.pallet_warnings:
            lines.append("No overloaded pallets.")
            return "\n".join(lines)

        for warning in report.pallet_warnings:
            name = f" ({warning.pallet_name})" if warning.pallet_name else ""
            lines.append(
                f"[WARN] {warning.pallet_instance_id}{name}: "
                f"{warning.actual_weight_lb:.1f} lb on {warning.max_weight_lb:.1f} lb "
                f"limit (+{warning.overload_percent:.1f}%)"
            )
            lines.append(f"       Loaded: {', '.join(warning.loaded_instance_ids)}")
        return "\n".join(lines)


class JsonExporter:
    """Exports load reports as JSON-ready data."""

    def to_dict(self, report: LoadReport) -> dict[str, Any]:
        stats = report.stats
        return {
            "snapshot_key": report.snapshot_key,
            "stats": {
                "total_count": stats.total_count,
                "packed_count": stats.packed_count,
                "used_volume_in3": stats.used_volume_in3,
                "used_volume_percent": stats.used_volume_percent,
                "total_weight_lb": stats.total_weight_lb,
                "capacity_in3": stats.capacity_in3,
            },
            "center_of_gravity": self._cog(report.center_of_gravity),
            "oog_warnings": [
                {
                    "instance_id": w.instance_id,
                    "catalog_item_id": w.catalog_item_id,
                    "item_name": w.item_name,
                    "issues": [issue.value for issue in w.sorted_issues],
                }
                for w in report.oog_warnings
            ],
            "pallet_warnings": [
                {
                    "pallet_instance_id": w.pallet_instance_id,
                    "pallet_name": w.pallet_name,
                    "max_weight_lb": w.max_weight_lb,
                    "actual_weight_lb": w.actual_weight_lb,
                    "overload_percent": w.overload_percent,
                    "loaded_instance_ids": list(w.loaded_instance_ids),
                }
                for w in report.pallet_warnings
            ],
            "zones": self.zones_to_list(report.zones),
        }

    def zones_to_list(self, zones: list[AABB]) -> list[dict[str, Any]]:
        return [_zone(zone) for zone in zones]

    def _cog(self, cog: CoGResult | None) -> dict[str, Any] | None:
        if cog is None:
            return None
        return {
            "position": _position(cog.position),
            "deviation_percent": {
                "x": cog.deviation_percent.x,
                "z": cog.deviation_percent.z,
            },
            "total_weight_lb": cog.total_weight_lb,
            "within_tolerance": cog.within_tolerance,
            "status": cog.status.value,
        }

    def export(self, report: LoadReport) -> str:
        """Export a load report as a JSON string."""
        return json.dumps(self.to_dict(report), indent=2)
