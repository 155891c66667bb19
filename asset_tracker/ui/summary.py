# asset_tracker/ui/summary.py
import pandas as pd
from rich.console import Console

from asset_tracker.core.lifecycle import EolStatus
from asset_tracker.models.asset import AssetKind

def summarize(df: pd.DataFrame) -> dict:
    """Counts shown under the table. Expects the frame from build_report_frame()."""
    if df is None or df.empty:
        return {"total": 0, "critical": 0, "warning": 0,
                "by_kind": {k.value: 0 for k in AssetKind}, "by_office": {}}
    by_kind = df["kind"].value_counts()
    by_office = df.groupby("office").size().sort_index()
    return {
        "total": len(df),
        "critical": int((df["status"] == EolStatus.CRITICAL.value).sum()),
        "warning": int((df["status"] == EolStatus.WARNING.value).sum()),
        "by_kind": {k.value: int(by_kind.get(k.value, 0)) for k in AssetKind},
        "by_office": {office: int(n) for office, n in by_office.items()},
    }

def render_summary(df: pd.DataFrame, console: Console) -> None:
    if df is None or df.empty:
        return
    stats = summarize(df)
    lines = [
        f"Total assets: {stats['total']}",
        f"Assets nearing end of life (< 3 months): {stats['critical']}",
        f"Assets nearing end of life (3-6 months): {stats['warning']}",
        f"Computers: {stats['by_kind'][AssetKind.COMPUTER.value]}",
        f"Phones: {stats['by_kind'][AssetKind.PHONE.value]}",
        "\nAssets by Office:",
    ]
    lines += [f"{office}: {count}" for office, count in stats["by_office"].items()]
    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)
